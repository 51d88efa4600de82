## Base LLM Client Interface
from abc import ABC, abstractmethod


class LLMClient(ABC):
    """A single-attempt text completion endpoint.

    Implementations raise on transport, quota or timeout errors; structure is
    enforced by the caller (see app.agents.structured).
    """

    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        raise NotImplementedError
