"""FastAPI server exposing round operations."""

import logging
from contextlib import asynccontextmanager
from typing import Any
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from frontline import __version__
from frontline.api.schemas import (
    BalanceView,
    ClaimRequest,
    DepositRequest,
    PlayerRoundView,
    RoundView,
    StakeRequest,
)
from frontline.config import get_settings
from frontline.database import check_db_connection, init_db
from frontline.engine import ClaimReceipt, FrontlineError, is_alive
from frontline.observability import initialize_logfire
from frontline.services import GameService, RecordNotFound

logger = logging.getLogger(__name__)


def get_game_service() -> GameService:
    """FastAPI dependency providing the game service."""
    return GameService()


def create_app(manage_database: bool = True) -> FastAPI:
    """
    Build the API application.

    With ``manage_database`` the lifespan creates missing tables and checks
    the connection on startup; tests that inject their own service skip it.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logfire.info("Starting Frontline API", environment=settings.environment)

        if manage_database:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
            init_db()
            if check_db_connection():
                logger.info("Database connection successful")
            else:
                logger.error("Database connection failed")

        yield

        logfire.info("Shutting down Frontline API")

    app = FastAPI(title="Frontline API", version=__version__, lifespan=lifespan)

    if initialize_logfire(settings):
        logfire.instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RecordNotFound)
    async def not_found_handler(request: Request, exc: RecordNotFound):
        return JSONResponse(status_code=404, content={"code": exc.code, "detail": str(exc)})

    @app.exception_handler(FrontlineError)
    async def frontline_error_handler(request: Request, exc: FrontlineError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.code}")
        return JSONResponse(status_code=409, content={"code": exc.code, "detail": str(exc)})

    @app.get("/health")
    def health() -> dict[str, Any]:
        """Liveness probe."""
        return {"alive": is_alive(), "version": __version__}

    @app.post("/rounds", response_model=RoundView, status_code=201)
    def create_round(service: GameService = Depends(get_game_service)):
        return service.create_round()

    @app.get("/rounds", response_model=list[RoundView])
    def list_rounds(service: GameService = Depends(get_game_service)):
        return service.list_rounds()

    @app.get("/rounds/{round_id}", response_model=RoundView)
    def get_round(round_id: UUID, service: GameService = Depends(get_game_service)):
        return service.get_round(round_id)

    @app.post("/rounds/{round_id}/open", response_model=RoundView)
    def open_round(round_id: UUID, service: GameService = Depends(get_game_service)):
        return service.open_round(round_id)

    @app.post("/rounds/{round_id}/close", response_model=RoundView)
    def close_round(round_id: UUID, service: GameService = Depends(get_game_service)):
        return service.close_round(round_id)

    @app.post("/rounds/{round_id}/stake", response_model=PlayerRoundView)
    def stake(
        round_id: UUID,
        body: StakeRequest,
        service: GameService = Depends(get_game_service),
    ):
        return service.stake(round_id, body.player, body.a, body.b, body.c, value=body.value)

    @app.get("/rounds/{round_id}/players/{player}", response_model=PlayerRoundView)
    def get_player_round(
        round_id: UUID,
        player: str,
        round_index: int | None = None,
        service: GameService = Depends(get_game_service),
    ):
        return service.get_player_round(round_id, player, round_index)

    @app.post("/rounds/{round_id}/players/{player}/score", response_model=PlayerRoundView)
    def compute_points(
        round_id: UUID,
        player: str,
        round_index: int | None = None,
        service: GameService = Depends(get_game_service),
    ):
        return service.compute_points(round_id, player, round_index)

    @app.post("/rounds/{round_id}/players/{player}/claim", response_model=ClaimReceipt)
    def claim(
        round_id: UUID,
        player: str,
        body: ClaimRequest,
        service: GameService = Depends(get_game_service),
    ):
        return service.claim(round_id, player, body.caller, round_index=body.round_index)

    @app.get("/rounds/{round_id}/events")
    def list_events(
        round_id: UUID,
        kind: str | None = None,
        service: GameService = Depends(get_game_service),
    ) -> list[dict[str, Any]]:
        return [event.model_dump() for event in service.list_events(round_id, kind)]

    @app.get("/accounts/{address}", response_model=BalanceView)
    def get_balance(address: str, service: GameService = Depends(get_game_service)):
        return BalanceView(address=address, balance=service.get_balance(address))

    @app.post("/accounts/{address}/deposit", response_model=BalanceView)
    def deposit(
        address: str,
        body: DepositRequest,
        service: GameService = Depends(get_game_service),
    ):
        try:
            balance = service.deposit(address, body.amount)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return BalanceView(address=address, balance=balance)

    return app
