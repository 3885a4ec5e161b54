"""Assistant chat API backend using FastAPI + Mangum for AWS Lambda."""

import logging
import time

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool
from mangum import Mangum

from assistant_api.errors import BadRequestError, ErrorKind
from assistant_api.infra.runtime import (
    ensure_langsmith_configured,
    flush_langsmith_traces,
    get_chat_dispatcher,
    get_stored_credential,
)
from assistant_api.model_registry import describe
from assistant_api.results import Failure
from assistant_api.schemas import ChatRequest, ChatResponse, ModelMetadata
from assistant_api.services.chat_dispatcher import (
    parse_model_identifier,
    resolve_transport_family,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

app = FastAPI()
router = APIRouter(prefix="/api")

FAILURE_STATUS_CODES = {ErrorKind.NOT_IMPLEMENTED: 501}


def resolve_credential(request: ChatRequest) -> str:
    """Pick the request's key, else the stored key for the model's transport family."""
    if request.api_key:
        return request.api_key

    identifier = parse_model_identifier(request.model)
    if identifier is None:
        return ""
    descriptor = describe(identifier)
    family = resolve_transport_family(descriptor.provider_family)
    if family is None:
        return ""

    stored = get_stored_credential(family)
    if stored:
        return stored
    if descriptor.requires_credential:
        raise BadRequestError(f"API key required for model: {identifier.value}")
    return ""


@router.get("/models", response_model=list[ModelMetadata])
def list_models() -> list[ModelMetadata]:
    """Return the model catalog in display order."""
    return [
        ModelMetadata.from_descriptor(descriptor)
        for descriptor in get_chat_dispatcher().list_available_models()
    ]


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest) -> ChatResponse:
    """Send the conversation to the selected model and return the assistant reply."""
    await run_in_threadpool(ensure_langsmith_configured)
    try:
        credential = await run_in_threadpool(resolve_credential, request)
        start = time.time()
        result = await get_chat_dispatcher().send(request.model, credential, request.messages)
        duration_seconds = round(time.time() - start, 2)
    except BadRequestError as e:
        logger.warning("Chat request rejected", extra={"model": request.model})
        raise HTTPException(status_code=400, detail=str(e)) from e
    finally:
        flush_langsmith_traces()

    if isinstance(result, Failure):
        raise HTTPException(
            status_code=FAILURE_STATUS_CODES.get(result.kind, 502),
            detail={"error": result.kind.value, "message": result.detail},
        )

    return ChatResponse(
        message=result.text,
        model=request.model,
        input_tokens=result.usage.input_tokens if result.usage else None,
        output_tokens=result.usage.output_tokens if result.usage else None,
        duration_seconds=duration_seconds,
    )


@router.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(router)


handler = Mangum(app)
