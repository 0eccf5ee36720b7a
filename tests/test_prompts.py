import pytest

from models import LANGUAGES, SourceKind, TranslationRequest
from translation.prompts import build_prompts


CODE_LANGUAGES = [label for label in LANGUAGES if label not in ("Natural Language", "Pseudocode")]


@pytest.mark.parametrize("source", ["Natural Language", "Pseudocode"])
@pytest.mark.parametrize("target", ["Python", "Rust", "Pascal"])
def test_description_prompts(source, target):
    text = "read two numbers and print their sum"
    prompts = build_prompts(TranslationRequest(text, source, target))

    assert text in prompts.user
    assert target in prompts.user
    assert target in prompts.system
    assert "translate" not in prompts.system.lower()
    assert "reasonable assumptions" in prompts.system


@pytest.mark.parametrize("source", CODE_LANGUAGES)
def test_code_prompts_name_both_languages(source):
    code = "function add(a, b) { return a + b; }"
    prompts = build_prompts(TranslationRequest(code, source, "Go"))

    assert prompts.user == f"Translate the following {source} code to Go:\n\n{code}"
    assert "translate code from one programming language to another" in prompts.system


def test_both_branches_forbid_prose_and_markdown():
    for source in ("Pseudocode", "Python"):
        prompts = build_prompts(TranslationRequest("x = 1", source, "Lua"))
        assert "without any explanations or markdown formatting" in prompts.system


def test_source_code_is_embedded_verbatim():
    code = "  printf(\"{target} %d\\n\", x);\n\t// {source}\n"
    prompts = build_prompts(TranslationRequest(code, "C", "Java"))

    assert prompts.user.endswith(code)


def test_description_user_prompt():
    prompts = build_prompts(TranslationRequest("sort a list", "Pseudocode", "C#"))
    assert prompts.user == "Convert the following Pseudocode into C# code:\n\nsort a list"


def test_messages_are_system_then_user():
    prompts = build_prompts(TranslationRequest("x", "Python", "Ruby"))
    messages = prompts.messages()

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == prompts.system
    assert messages[1]["content"] == prompts.user


def test_unknown_label_is_treated_as_code():
    assert SourceKind.for_language("COBOL") is SourceKind.CODE
    prompts = build_prompts(TranslationRequest("DISPLAY 'HI'.", "COBOL", "Python"))
    assert prompts.user.startswith("Translate the following COBOL code to Python")
