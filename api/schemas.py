from typing import List

from pydantic import BaseModel


class TranslateCodeResponse(BaseModel):
    translatedCode: str


class ErrorResponse(BaseModel):
    error: str


class LanguagesResponse(BaseModel):
    languages: List[str]
    defaultSource: str
    defaultTarget: str
