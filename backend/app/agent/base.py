from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from app.agent.llm_client import TextCompletionClient

InType = TypeVar("InType")
OutType = TypeVar("OutType")

class BaseAgent(ABC, Generic[InType, OutType]):
    """Abstract base class for agents backed by a text completion client."""

    def __init__(self, client: TextCompletionClient, *, model: str, temperature: float):
        self.client = client
        self.model = model
        self.temperature = temperature

    @abstractmethod
    async def run(self, input_data: InType) -> OutType:
        """Run the agent on the given input to produce its output."""
        pass
