## Hosted providers exposing an OpenAI-compatible API (Groq, Gemini)
from openai import OpenAI
from .base import LLMClient

class OpenAICompatibleClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str, timeout: float):
        # max_retries=0: remote calls are single-attempt, callers fall back instead
        self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)
        self.model = model

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        resp = self.client.chat.completions.create(
            model=self.model,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        )
        return resp.choices[0].message.content.strip()
