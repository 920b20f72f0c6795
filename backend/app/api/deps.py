from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.agent.llm_client import CompletionClient, TextCompletionClient
from app.core.config import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]


@lru_cache()
def build_completion_client(api_key: str, base_url: str | None) -> CompletionClient:
    return CompletionClient(api_key=api_key, base_url=base_url)


def get_completion_client(settings: SettingsDep) -> TextCompletionClient | None:
    # The SDK refuses to build a client without a key; the route reports that case.
    if not settings.openai_configured:
        return None
    return build_completion_client(settings.OPENAI_API_KEY, settings.OPENAI_BASE_URL)


CompletionClientDep = Annotated[TextCompletionClient | None, Depends(get_completion_client)]
