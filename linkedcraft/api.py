"""
FastAPI application exposing the LinkedCraft serverless-style endpoints.

All error bodies share the ``{"error": str}`` shape expected by the browser
client.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fetchers.topic_suggester import TopicSuggester
from linkedcraft import __version__
from trend_engine.config import ConfigurationError, Settings
from trend_engine.models import TopicSuggestion, TrendResponse
from trend_engine.pipeline import TrendPipeline

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class TrendRequest(BaseModel):
    """Body of ``POST /linkedin-trends``."""

    force_refresh: bool = Field(False, alias="forceRefresh")

    model_config = {"populate_by_name": True}


class SuggestRequest(BaseModel):
    """Body of ``POST /suggest-linkedin-topics``."""

    user_input: Optional[str] = Field(None, alias="userInput")

    model_config = {"populate_by_name": True}


class SuggestResponse(BaseModel):
    topics: List[TopicSuggestion]


class ErrorResponse(BaseModel):
    error: str


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[TrendPipeline] = None,
    suggester: Optional[TopicSuggester] = None,
) -> FastAPI:
    """Build the app; collaborators default to ones built from *settings*."""
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="LinkedCraft API",
        description="Trending LinkedIn topics and topic ideas for the LinkedCraft client.",
        version=__version__,
    )
    app.state.settings = settings
    app.state.pipeline = pipeline or TrendPipeline.from_settings(settings)
    app.state.suggester = suggester or TopicSuggester(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected request body for {request.url.path}: {exc.errors()}")
        return _error("Invalid request body", status.HTTP_400_BAD_REQUEST)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    @app.options("/linkedin-trends")
    @app.options("/suggest-linkedin-topics")
    def preflight():
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)

    @app.post(
        "/linkedin-trends",
        response_model=TrendResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def linkedin_trends(body: Optional[TrendRequest] = None):
        force_refresh = body.force_refresh if body else False
        try:
            return app.state.pipeline.run(force_refresh=force_refresh)
        except ConfigurationError as e:
            logger.error(f"Trend pipeline misconfigured: {e}")
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except Exception as e:
            logger.exception("Error generating LinkedIn trends")
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.post(
        "/suggest-linkedin-topics",
        response_model=SuggestResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def suggest_linkedin_topics(body: Optional[SuggestRequest] = None):
        user_input = body.user_input if body else None
        try:
            topics = app.state.suggester.suggest(user_input)
        except Exception as e:
            logger.error(f"Error suggesting LinkedIn topics: {e}")
            return _error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        return SuggestResponse(topics=topics)

    return app
