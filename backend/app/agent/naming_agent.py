from app.agent.base import BaseAgent
from app.agent.errors import TransportError
from app.agent.prompts.superhero import build_prompt


class SuperheroNamingAgent(BaseAgent[str, str]):
    """
    Suggests superhero names for an animal with a few-shot completion prompt.
    Every call hits the provider; nothing is cached between requests.
    """

    async def run(self, input_data: str) -> str:
        """Return the text of the first choice, untouched."""
        choices = await self.client.complete(
            build_prompt(input_data),
            model=self.model,
            temperature=self.temperature,
        )
        if not choices:
            raise TransportError(f"Provider {self.model} returned no choices")
        return choices[0]
