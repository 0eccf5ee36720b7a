"""FastAPI gateway for code translation."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import ErrorResponse, LanguagesResponse, TranslateCodeResponse
from config import Config
from errors import TranslationError
from models import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGES,
    TranslationRequest,
)
from translation import CodeTranslator


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.translator.close()


app = FastAPI(title="Code Translation API", version="1.0.0", lifespan=lifespan)

# Any origin may call the gateway
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

# Configuration
config = Config.from_env()

# Shared upstream client; holds no per-request state
app.state.translator = CodeTranslator(config)


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.options("/translate-code")
async def translate_code_preflight():
    """Pre-flight branch: empty success response."""
    return Response(status_code=200)


@app.post(
    "/translate-code",
    response_model=TranslateCodeResponse,
    responses={500: {"model": ErrorResponse}},
)
async def translate_code(request: Request):
    """
    Translate source code (or a description) into the target language.

    Body: ``{"sourceCode", "sourceLanguage", "targetLanguage"}``.
    Every failure is returned as ``{"error": message}``.
    """
    try:
        body = await request.json()
        if not isinstance(body, dict):
            body = {}

        translation_request = TranslationRequest.from_fields(
            body.get("sourceCode"),
            body.get("sourceLanguage"),
            body.get("targetLanguage"),
        )
        result = await request.app.state.translator.translate(translation_request)

    except TranslationError as e:
        logger.error("Translation error: %s", e)
        return error_response(str(e), e.status_code)

    except Exception:
        logger.exception("Translation error")
        return error_response("Translation failed")

    return TranslateCodeResponse(translatedCode=result.translated_code)


@app.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    """Language labels offered to the client selectors."""
    return LanguagesResponse(
        languages=LANGUAGES,
        defaultSource=DEFAULT_SOURCE_LANGUAGE,
        defaultTarget=DEFAULT_TARGET_LANGUAGE,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "model": config.model,
        "configured": config.has_api_key,
    }

