from functools import lru_cache

from app.settings import Settings, settings
from app.agents.llm.base import LLMClient
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.openai_compat import OpenAICompatibleClient

def build_llm_client(cfg: Settings) -> LLMClient:
    provider = cfg.LLM_PROVIDER.lower()

    if provider == "groq":
        return OpenAICompatibleClient(
            api_key=cfg.GROQ_API_KEY,
            base_url=cfg.GROQ_BASE_URL,
            model=cfg.GROQ_MODEL,
            timeout=cfg.LLM_TIMEOUT_SECONDS,
        )

    if provider == "gemini":
        return OpenAICompatibleClient(
            api_key=cfg.GEMINI_API_KEY,
            base_url=cfg.GEMINI_BASE_URL,
            model=cfg.GEMINI_MODEL,
            timeout=cfg.LLM_TIMEOUT_SECONDS,
        )

    return OllamaOpenAIClient(
        base_url = cfg.ollama_base_url,
        model = cfg.ollama_model,
        timeout = cfg.LLM_TIMEOUT_SECONDS,
    )


@lru_cache
def get_llm_client() -> LLMClient:
    """One configured client per process."""
    return build_llm_client(settings)
