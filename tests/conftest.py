import json

import httpx
import pytest

from config import Config
from translation import CodeTranslator


class UpstreamStub:
    """Records requests sent to the chat-completion endpoint and replays a canned response."""

    def __init__(self, status_code=200, body=None, text=None, error=None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def config():
    return Config(api_key="test-key", gateway_url="https://gateway.test/v1/chat/completions")


@pytest.fixture
def make_translator(config):
    """Build a CodeTranslator whose HTTP client talks to an UpstreamStub."""
    def _make(stub: UpstreamStub, api_key="test-key") -> CodeTranslator:
        cfg = Config(
            api_key=api_key,
            gateway_url=config.gateway_url,
            model=config.model,
            temperature=config.temperature,
        )
        client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
        return CodeTranslator(cfg, client=client)
    return _make
