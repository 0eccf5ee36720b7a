"""Prompt templates for code translation and description-to-code generation."""
from models import PromptPair, SourceKind, TranslationRequest


OUTPUT_RULE = (
    "Only return the {result} without any explanations or markdown formatting. "
    "The code must be properly indented and well-structured."
)

# System prompt when the source is prose or pseudocode
DESCRIPTION_SYSTEM_PROMPT = """You are an expert programmer. Your task is to convert natural language descriptions or pseudocode into working {target} code while:
1. Understanding the intent and logic from the description
2. Following {target}'s best practices and idioms
3. Writing clean, well-structured code with proper indentation
4. Adding brief comments only when necessary to explain complex logic
5. Ensuring the code is syntactically correct and functional
6. Using consistent formatting with proper spacing and line breaks
7. Making reasonable assumptions for unspecified details

""" + OUTPUT_RULE.format(result="working code")

# System prompt when the source is code in another language
CODE_SYSTEM_PROMPT = """You are an expert code translator. Your task is to accurately translate code from one programming language to another while:
1. Preserving the logic and functionality
2. Following the target language's best practices and idioms
3. Maintaining proper code structure with correct indentation
4. Adding brief comments only when necessary to explain language-specific differences
5. Ensuring the translated code is syntactically correct and functional
6. Using consistent formatting with proper spacing and line breaks
7. Organizing code in a clean, readable structure

""" + OUTPUT_RULE.format(result="translated code")

DESCRIPTION_USER_PROMPT = "Convert the following {source} into {target} code:\n\n{code}"
CODE_USER_PROMPT = "Translate the following {source} code to {target}:\n\n{code}"


def build_prompts(request: TranslationRequest) -> PromptPair:
    """
    Compose the system and user instructions for a request.

    The source text is embedded verbatim. The "no markdown" rule is only an
    instruction to the model; nothing downstream enforces it.
    """
    if request.source_kind is SourceKind.DESCRIPTION:
        system = DESCRIPTION_SYSTEM_PROMPT.replace("{target}", request.target_language)
        user_template = DESCRIPTION_USER_PROMPT
    else:
        system = CODE_SYSTEM_PROMPT
        user_template = CODE_USER_PROMPT

    # Plain concatenation so braces in the source code are left alone
    header, _, _ = user_template.partition("{code}")
    header = header.replace("{source}", request.source_language).replace(
        "{target}", request.target_language
    )
    return PromptPair(system=system, user=header + request.source_code)
