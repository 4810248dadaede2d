from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .chat.completion import build_completion_response
from .chat.models import ChatCompletionResponse, CompletionRequest
from .chat.prompt import build_prompt
from .llm.config import OllamaConfig
from .llm.ollama_client import OllamaClient, OllamaError
from .restaurants.lookup import (
    RestaurantLookup,
    RestaurantLookupError,
    StaticRestaurantLookup,
)

logger = logging.getLogger(__name__)


# ── Dependencies ─────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_ollama_client() -> OllamaClient:
    return OllamaClient(OllamaConfig.from_env())


@lru_cache(maxsize=1)
def get_restaurant_lookup() -> RestaurantLookup:
    return StaticRestaurantLookup()


async def parse_completion_request(request: Request) -> CompletionRequest:
    """Decode the JSON body whatever Content-Type the caller sent."""
    try:
        return CompletionRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Resolve config and open the HTTP client once, at startup.
    client = get_ollama_client()
    logger.info(
        "Using Ollama model %s at %s", client.config.model, client.config.chat_url
    )
    yield
    client.close()
    get_ollama_client.cache_clear()


app = FastAPI(
    title="Restaurant Chat Bridge",
    version="1.0.0",
    lifespan=lifespan,
)


# ── Error rendering ──────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request body: %s", exc.errors())
    return PlainTextResponse("Invalid request body", status_code=400)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


# ── Endpoints ────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/v1/chat/completions",
    response_model=ChatCompletionResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CompletionRequest.model_json_schema()}},
        }
    },
)
def chat_completions(
    body: CompletionRequest = Depends(parse_completion_request),
    lookup: RestaurantLookup = Depends(get_restaurant_lookup),
    client: OllamaClient = Depends(get_ollama_client),
) -> ChatCompletionResponse:
    # 1. Fetch candidate restaurants
    try:
        restaurants = lookup.lookup(body.location)
    except RestaurantLookupError as exc:
        logger.error("Restaurant lookup failed for %r: %s", body.location, exc)
        raise HTTPException(status_code=500, detail="Error fetching restaurant data") from exc

    # 2. Build the prompt and ask the model
    prompt = build_prompt(body.location, body.query, restaurants)
    try:
        reply = client.converse(prompt)
    except OllamaError as exc:
        logger.error("Ollama call failed: %s", exc)
        raise HTTPException(status_code=500, detail="Error generating AI response") from exc

    # 3. Wrap in an OpenAI-compatible envelope
    return build_completion_response(reply)
