import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.agent.errors import CompletionError, UpstreamError
from app.agent.naming_agent import SuperheroNamingAgent
from app.api.deps import CompletionClientDep, SettingsDep
from app.models import ErrorResponse, GenerateRequest, GenerateResult, error_body

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "OpenAI API key not configured, please follow instructions in README.md"
INVALID_ANIMAL_MESSAGE = "Please enter a valid animal"
GENERIC_ERROR_MESSAGE = "An error occurred during your request."


async def _read_animal(request: Request) -> str | None:
    """Return the requested animal, "" when absent, or None when the body is unusable."""
    raw = await request.body()
    if not raw.strip():
        return ""
    try:
        return GenerateRequest.model_validate_json(raw).animal
    except ValidationError:
        return None


# The body is parsed by hand so the key check runs before any input validation.
@router.post(
    "",
    response_model=GenerateResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": GenerateRequest.model_json_schema()}},
            "required": False,
        }
    },
)
async def generate_names(
    request: Request,
    settings: SettingsDep,
    client: CompletionClientDep,
):
    if client is None or not settings.openai_configured:
        return JSONResponse(status_code=500, content=error_body(MISSING_KEY_MESSAGE))

    animal = await _read_animal(request)
    if animal is None or not animal.strip():
        return JSONResponse(status_code=400, content=error_body(INVALID_ANIMAL_MESSAGE))

    agent = SuperheroNamingAgent(
        client,
        model=settings.MODEL_DEFAULT,
        temperature=settings.COMPLETION_TEMPERATURE,
    )
    try:
        result = await agent.run(animal)
    except UpstreamError as exc:
        logger.error("%s %s", exc.status, exc.body)
        return JSONResponse(status_code=exc.status, content=exc.body)
    except CompletionError as exc:
        logger.error("Error with OpenAI API request: %s", exc.message)
        return JSONResponse(status_code=500, content=error_body(GENERIC_ERROR_MESSAGE))
    except Exception as exc:
        logger.exception("Error with OpenAI API request: %s", exc)
        return JSONResponse(status_code=500, content=error_body(GENERIC_ERROR_MESSAGE))

    return GenerateResult(result=result)
