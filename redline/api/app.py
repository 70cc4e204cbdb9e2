"""
FastAPI Application - REST API over the race engine.

Endpoints:
    GET    /health                      Health check
    GET    /                            Service description
    GET    /api/v1/tracks               List circuit layouts
    GET    /api/v1/races                List active races
    POST   /api/v1/races                Create a race
    GET    /api/v1/races/{id}           Get race state
    DELETE /api/v1/races/{id}           End a race
    POST   /api/v1/races/{id}/rounds    Start the next round
    POST   /api/v1/races/{id}/turns     Take a turn for the current racer

Every response body is an Envelope: {success, message, data, error, error_code}.
"""

from typing import Annotated
import logging
import os

from .. import __version__

# Environment configuration
REDLINE_ENV = os.getenv("REDLINE_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
REDLINE_DEFAULT_LAPS = int(os.getenv("REDLINE_DEFAULT_LAPS", "2"))
REDLINE_HAND_SIZE = int(os.getenv("REDLINE_HAND_SIZE", "7"))

log = logging.getLogger(__name__)


def status_code_for(envelope) -> int:
    """HTTP status for an envelope."""
    from .schemas import ErrorCode

    if envelope.success:
        return 200
    if envelope.error_code == ErrorCode.SESSION_NOT_FOUND.value:
        return 404
    if envelope.error_code == ErrorCode.INTERNAL_ERROR.value:
        return 500
    if envelope.error_code in {"NOT_YOUR_TURN", "ROUND_IN_PROGRESS", "RACE_OVER"}:
        return 409
    return 400


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional RaceService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Body, Query, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import RaceService
    from .schemas import (
        Envelope,
        ErrorCode,
        CreateRaceRequest,
        TurnRequest,
        HealthResponse,
    )

    app = FastAPI(
        title="Redline Race Engine API",
        description="""
Turn-based racing card game engine.

## Flow

1. `POST /api/v1/races` creates a race and deals opening hands
2. `POST /api/v1/races/{id}/rounds` builds the turn order for a round
3. `POST /api/v1/races/{id}/turns` plays the current racer's turn
4. Repeat 2-3 until the race status is `finished`

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Race does not exist |
| `VALIDATION_ERROR` | Race could not be set up |
| `NOT_YOUR_TURN` | Turn submitted for a racer who is not up |
| `ROUND_IN_PROGRESS` | Round started before the last one finished |
| engine codes | Rule violations such as `NOT_PLAYABLE` or `INSUFFICIENT_ENGINE` |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or RaceService()

    def respond(envelope: Envelope) -> JSONResponse:
        return JSONResponse(
            status_code=status_code_for(envelope),
            content=envelope.model_dump(mode="json", exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        log.warning("Invalid request on %s %s: %s", request.method, request.url.path, details)
        return respond(Envelope.fail(f"Invalid request: {details}", ErrorCode.VALIDATION_ERROR.value))

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return respond(Envelope.fail("Internal server error", ErrorCode.INTERNAL_ERROR.value))

    # =========================================================================
    # Service endpoints
    # =========================================================================

    @app.get("/health", response_model=HealthResponse, tags=["Service"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="redline", version=__version__)

    @app.get("/", tags=["Service"])
    async def root() -> JSONResponse:
        return respond(Envelope.ok({
            "name": "Redline Race Engine API",
            "version": __version__,
            "environment": REDLINE_ENV,
            "endpoints": {
                "races": "/api/v1/races",
                "tracks": "/api/v1/tracks",
                "health": "/health",
            },
        }))

    @app.get("/api/v1/tracks", tags=["Races"], summary="List circuit layouts")
    async def list_tracks() -> JSONResponse:
        return respond(api_service.list_tracks())

    # =========================================================================
    # Races
    # =========================================================================

    @app.get("/api/v1/races", tags=["Races"], summary="List active races")
    async def list_races() -> JSONResponse:
        return respond(api_service.list_races())

    @app.post("/api/v1/races", tags=["Races"], summary="Create a race")
    async def create_race(payload: Annotated[dict, Body()]) -> JSONResponse:
        """Create a race. Laps and hand size default to the server configuration."""
        payload.setdefault("number_of_laps", REDLINE_DEFAULT_LAPS)
        payload.setdefault("hand_size", REDLINE_HAND_SIZE)
        try:
            request = CreateRaceRequest.model_validate(payload)
        except ValueError as e:
            return respond(Envelope.fail(str(e), ErrorCode.VALIDATION_ERROR.value))
        return respond(api_service.create_race(request))

    @app.get("/api/v1/races/{race_id}", tags=["Races"], summary="Get race state")
    async def get_race(race_id: str) -> JSONResponse:
        return respond(api_service.get_race(race_id))

    @app.delete("/api/v1/races/{race_id}", tags=["Races"], summary="End a race")
    async def end_race(
        race_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> JSONResponse:
        return respond(api_service.end_race(race_id, reason))

    # =========================================================================
    # Game loop
    # =========================================================================

    @app.post("/api/v1/races/{race_id}/rounds", tags=["Game Loop"], summary="Start the next round")
    async def start_round(race_id: str) -> JSONResponse:
        return respond(api_service.start_round(race_id))

    @app.post("/api/v1/races/{race_id}/turns", tags=["Game Loop"], summary="Take a turn")
    async def take_turn(race_id: str, request: TurnRequest) -> JSONResponse:
        return respond(api_service.take_turn(race_id, request))

    return app


# For running directly: uvicorn redline.api.app:app
app = create_app()
