import json

import httpx
import pytest

from app.agents.llm.client import build_llm_client
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.openai_compat import OpenAICompatibleClient
from app.settings import Settings


def make_settings(**overrides):
    return Settings(database_url="sqlite://", **overrides)


def test_groq_client_is_single_attempt_with_timeout():
    llm = build_llm_client(make_settings(LLM_PROVIDER="groq", GROQ_API_KEY="gsk_test", LLM_TIMEOUT_SECONDS=12))

    assert isinstance(llm, OpenAICompatibleClient)
    assert llm.model == "llama-3.1-8b-instant"
    assert llm.client.max_retries == 0
    assert llm.client.timeout == 12


def test_gemini_client_uses_openai_compatible_endpoint():
    llm = build_llm_client(make_settings(LLM_PROVIDER="gemini", GEMINI_API_KEY="key"))

    assert isinstance(llm, OpenAICompatibleClient)
    assert "generativelanguage.googleapis.com" in str(llm.client.base_url)


def test_ollama_is_the_default_provider():
    llm = build_llm_client(make_settings(LLM_TIMEOUT_SECONDS=30))

    assert isinstance(llm, OllamaOpenAIClient)
    assert llm.timeout == 30


def test_ollama_posts_chat_completion():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "hello"}}]})

    llm = OllamaOpenAIClient("http://ollama:11434/v1/", "llama3.1", transport=httpx.MockTransport(handler))

    assert llm.generate_text(system="sys", user="hi", temperature=0.1) == "hello"
    assert seen["url"] == "http://ollama:11434/v1/chat/completions"
    assert seen["body"]["messages"][1] == {"role": "user", "content": "hi"}
    assert seen["body"]["temperature"] == 0.1


def test_ollama_raises_on_http_error():
    llm = OllamaOpenAIClient(
        "http://ollama:11434/v1",
        "llama3.1",
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        llm.generate_text(system="sys", user="hi")
