"""Configuration management for the code translation gateway."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


@dataclass
class Config:
    """Configuration loaded from environment variables."""

    # Upstream chat-completion endpoint
    api_key: Optional[str] = None
    gateway_url: str = DEFAULT_GATEWAY_URL
    model: str = DEFAULT_MODEL
    temperature: float = 0.3
    request_timeout: Optional[float] = None  # None waits for the upstream indefinitely

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "info"

    # Streamlit client
    api_base_url: str = "http://localhost:8000"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables (and a local .env file)."""
        load_dotenv()

        return cls(
            api_key=os.getenv("LOVABLE_API_KEY") or None,
            gateway_url=os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
            model=os.getenv("AI_MODEL", DEFAULT_MODEL),
            temperature=float(os.getenv("AI_TEMPERATURE", "0.3")),
            request_timeout=_optional_float(os.getenv("AI_REQUEST_TIMEOUT")),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "info"),
            api_base_url=os.getenv("API_BASE_URL", "http://localhost:8000"),
        )
