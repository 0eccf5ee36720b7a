"""Data models for the code translation gateway."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from errors import MissingParameters


# Labels offered in the language selectors, listed alphabetically
LANGUAGES = sorted([
    "Natural Language", "Pseudocode",
    "JavaScript", "TypeScript", "Python", "Java", "C", "C++", "C#", "Ruby", "Go",
    "Rust", "Swift", "Kotlin", "PHP", "Pascal", "SQL", "HTML", "CSS", "Lua",
])

DESCRIPTION_LANGUAGES = frozenset({"Natural Language", "Pseudocode"})

DEFAULT_SOURCE_LANGUAGE = "JavaScript"
DEFAULT_TARGET_LANGUAGE = "Pascal"


class SourceKind(Enum):
    """What the user pasted: a description to implement or code to translate."""
    DESCRIPTION = "description"
    CODE = "code"

    @classmethod
    def for_language(cls, label: str) -> "SourceKind":
        if label in DESCRIPTION_LANGUAGES:
            return cls.DESCRIPTION
        return cls.CODE


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class TranslationRequest:
    """A validated translation request."""
    source_code: str       # Kept verbatim, never trimmed
    source_language: str   # Label from LANGUAGES (unknown labels are treated as code)
    target_language: str

    @property
    def source_kind(self) -> SourceKind:
        return SourceKind.for_language(self.source_language)

    @classmethod
    def from_fields(
        cls,
        source_code: Any,
        source_language: Any,
        target_language: Any,
    ) -> "TranslationRequest":
        """Build a request, raising MissingParameters if any field is absent or blank."""
        if _is_blank(source_code) or _is_blank(source_language) or _is_blank(target_language):
            raise MissingParameters()
        return cls(
            source_code=source_code,
            source_language=source_language,
            target_language=target_language,
        )


@dataclass(frozen=True)
class TranslationResult:
    """Code returned by the model, unprocessed."""
    translated_code: str


@dataclass(frozen=True)
class PromptPair:
    """System and user instructions sent to the chat-completion endpoint."""
    system: str
    user: str

    def messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]
