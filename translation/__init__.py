"""Translation layer - prompt composition and the upstream LLM client."""
from .llm_translator import CodeTranslator, extract_content
from .prompts import build_prompts

__all__ = ["CodeTranslator", "build_prompts", "extract_content"]
