"""Command-line translation of a source file through the gateway's translator."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from config import Config
from errors import TranslationError
from models import LANGUAGES, TranslationRequest
from translation import CodeTranslator


# File extension -> language label, used when --from is omitted
EXTENSION_LANGUAGES = {
    ".js": "JavaScript", ".mjs": "JavaScript", ".cjs": "JavaScript",
    ".ts": "TypeScript",
    ".py": "Python",
    ".java": "Java",
    ".c": "C", ".h": "C",
    ".cpp": "C++", ".cc": "C++", ".cxx": "C++", ".hpp": "C++",
    ".cs": "C#",
    ".rb": "Ruby",
    ".go": "Go",
    ".rs": "Rust",
    ".swift": "Swift",
    ".kt": "Kotlin", ".kts": "Kotlin",
    ".php": "PHP",
    ".pas": "Pascal", ".pp": "Pascal",
    ".sql": "SQL",
    ".html": "HTML", ".htm": "HTML",
    ".css": "CSS",
    ".lua": "Lua",
    ".txt": "Natural Language", ".md": "Natural Language",
}


class TranslationPipeline:
    """Reads a file, translates it, and writes the result."""

    def __init__(self, config: Optional[Config] = None, translator: Optional[CodeTranslator] = None):
        self.config = config or Config.from_env()
        self.translator = translator or CodeTranslator(self.config)

    def _detect_language(self, file_path: str) -> str:
        """Detect source language label from file extension."""
        ext = Path(file_path).suffix.lower()
        if ext not in EXTENSION_LANGUAGES:
            raise ValueError(f"Cannot detect source language for '{ext}' files; pass --from")
        return EXTENSION_LANGUAGES[ext]

    async def translate_file(
        self,
        input_path: str,
        target_language: str,
        source_language: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> str:
        """
        Translate a file into the target language.

        Args:
            input_path: Path to the source file
            target_language: Label of the language to produce
            source_language: Label of the source (detected from extension if omitted)
            output_path: Optional path to write the result to

        Returns:
            The translated code
        """
        path = Path(input_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {input_path}")

        source_language = source_language or self._detect_language(input_path)
        request = TranslationRequest.from_fields(
            path.read_text(encoding="utf-8"),
            source_language,
            target_language,
        )
        result = await self.translator.translate(request)

        if output_path:
            Path(output_path).write_text(result.translated_code, encoding="utf-8")

        return result.translated_code

    async def close(self):
        """Clean up resources."""
        await self.translator.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate a source file into another language.")
    parser.add_argument("input_file")
    parser.add_argument("--from", dest="source_language", choices=LANGUAGES,
                        help="source language (detected from the file extension if omitted)")
    parser.add_argument("--to", dest="target_language", choices=LANGUAGES, required=True)
    parser.add_argument("-o", "--output", dest="output_file", help="write the result here instead of stdout")
    return parser


# CLI entry point
async def main(argv=None) -> int:
    """CLI entry point for direct pipeline execution."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    pipeline = TranslationPipeline(config)

    try:
        translated = await pipeline.translate_file(
            args.input_file,
            args.target_language,
            source_language=args.source_language,
            output_path=args.output_file,
        )
    except (TranslationError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await pipeline.close()

    if args.output_file:
        print(f"Translation complete: {args.output_file}", file=sys.stderr)
    else:
        print(translated)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
