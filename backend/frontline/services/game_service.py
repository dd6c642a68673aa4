"""Transactional round, staking and settlement service."""

import logging
from contextlib import contextmanager
from typing import Generator
from uuid import UUID

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from frontline import engine
from frontline.config import Settings, get_settings
from frontline.database import get_db_context, get_session_factory
from frontline.engine import BetPlaced, ClaimReceipt, Claimed, RoundClosed, RoundMismatch
from frontline.engine.fixed_point import MAX_STORED
from frontline.models import Account, PlayerRound, Round
from frontline.services.event_log import DatabaseEventSink, read_events
from frontline.services.exceptions import (
    InsufficientBalance,
    RecordNotFound,
    RoundConflict,
)

logger = logging.getLogger(__name__)


class GameService:
    """
    Runs every engine operation inside a single transaction.

    Guard failures, balance failures and concurrent-modification conflicts
    all roll back the whole operation, including any events it emitted and
    any value it moved.
    """

    def __init__(
        self,
        session_factory: sessionmaker | None = None,
        settings: Settings | None = None,
    ):
        self._session_factory = session_factory
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @contextmanager
    def _transaction(self) -> Generator[Session, None, None]:
        factory = self._session_factory or get_session_factory()
        with get_db_context(factory) as db:
            try:
                yield db
                db.commit()
            except StaleDataError as e:
                raise RoundConflict() from e
            except IntegrityError as e:
                raise RoundConflict(f"Conflicting write: {e.orig}") from e

    def _load_round(self, db: Session, round_id: UUID) -> Round:
        rnd = db.get(Round, round_id)
        if rnd is None:
            raise RecordNotFound(f"Round {round_id} not found")
        return rnd

    def _find_player_round(
        self,
        db: Session,
        rnd: Round,
        player: str,
        round_index: int | None = None,
    ) -> PlayerRound | None:
        index = rnd.index if round_index is None else round_index
        return db.execute(
            select(PlayerRound)
            .where(PlayerRound.round_id == rnd.id)
            .where(PlayerRound.round == index)
            .where(PlayerRound.player == player)
        ).scalar_one_or_none()

    def _load_player_round(
        self,
        db: Session,
        rnd: Round,
        player: str,
        round_index: int | None = None,
    ) -> PlayerRound:
        player_round = self._find_player_round(db, rnd, player, round_index)
        if player_round is None:
            index = rnd.index if round_index is None else round_index
            raise RecordNotFound(f"No record for {player} in round #{index}")
        return player_round

    def _balance_of(self, db: Session, address: str) -> int:
        account = db.get(Account, address)
        return account.balance if account is not None else 0

    def _credit(self, db: Session, address: str, amount: int) -> Account:
        account = db.get(Account, address)
        if account is None:
            account = Account(address=address, balance=0)
            db.add(account)
            db.flush()
        account.balance += amount
        return account

    def _debit(self, db: Session, address: str, amount: int) -> Account:
        account = db.get(Account, address)
        balance = account.balance if account is not None else 0
        if balance < amount:
            raise InsufficientBalance(address, balance, amount)
        account.balance -= amount
        return account

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    def create_round(self) -> Round:
        """Create a new closed round."""
        with logfire.span("frontline.create_round"):
            with self._transaction() as db:
                rnd = engine.create_round()
                db.add(rnd)
            logger.info(f"Created round {rnd.id}")
            return rnd

    def open_round(self, round_id: UUID) -> Round:
        with logfire.span("frontline.open_round", round_id=str(round_id)):
            with self._transaction() as db:
                rnd = self._load_round(db, round_id)
                engine.open_round(rnd)
            return rnd

    def close_round(self, round_id: UUID) -> Round:
        with logfire.span("frontline.close_round", round_id=str(round_id)):
            with self._transaction() as db:
                rnd = self._load_round(db, round_id)
                engine.close_round(rnd, events=DatabaseEventSink(db, rnd.id))
            return rnd

    # ------------------------------------------------------------------
    # Value transfer
    # ------------------------------------------------------------------

    def deposit(self, address: str, amount: int) -> int:
        """Fund an account. Returns the new balance."""
        if amount <= 0:
            raise ValueError(f"Deposit must be positive, got {amount}")

        with self._transaction() as db:
            balance = self._balance_of(db, address)
            if balance + amount > MAX_STORED:
                raise ValueError(f"Deposit of {amount} would overflow the balance of {address}")
            account = self._credit(db, address, amount)
        logger.info(f"Deposited {amount} to {address} (balance {account.balance})")
        return account.balance

    def get_balance(self, address: str) -> int:
        with get_db_context(self._session_factory) as db:
            return self._balance_of(db, address)

    # ------------------------------------------------------------------
    # Player operations
    # ------------------------------------------------------------------

    def stake(
        self,
        round_id: UUID,
        player: str,
        a: int,
        b: int,
        c: int,
        value: int | None = None,
    ) -> PlayerRound:
        """
        Pay ``value`` from the player's account into the round.

        ``value`` defaults to ``a + b + c``. The player's record for the
        current round index is created on first use.
        """
        value = a + b + c if value is None else value

        with logfire.span("frontline.stake", round_id=str(round_id), player=player, value=value):
            with self._transaction() as db:
                rnd = self._load_round(db, round_id)

                player_round = self._find_player_round(db, rnd, player)
                if player_round is None:
                    player_round = engine.create_player_round(rnd, player)
                    db.add(player_round)

                engine.stake(
                    rnd, player_round, value, a, b, c,
                    events=DatabaseEventSink(db, rnd.id),
                )
                self._debit(db, player, value)
            return player_round

    def compute_points(
        self,
        round_id: UUID,
        player: str,
        round_index: int | None = None,
    ) -> PlayerRound:
        with logfire.span("frontline.compute_points", round_id=str(round_id), player=player):
            with self._transaction() as db:
                rnd = self._load_round(db, round_id)
                player_round = self._load_player_round(db, rnd, player, round_index)
                if player_round.round != rnd.index:
                    # Multipliers come from the live participant sets
                    raise RoundMismatch(
                        f"Record is bound to round #{player_round.round}, current is #{rnd.index}"
                    )
                engine.compute_points(rnd, player_round)
            return player_round

    def claim(
        self,
        round_id: UUID,
        player: str,
        caller: str,
        fee_bps: int | None = None,
        round_index: int | None = None,
    ) -> ClaimReceipt:
        """
        Settle a player's record, paying the fee to ``caller``.

        Any caller may trigger any player's claim and collect the fee.
        """
        fee_bps = self.settings.game.fee_bps if fee_bps is None else fee_bps

        with logfire.span(
            "frontline.claim", round_id=str(round_id), player=player, caller=caller
        ):
            with self._transaction() as db:
                rnd = self._load_round(db, round_id)
                player_round = self._load_player_round(db, rnd, player, round_index)

                receipt = engine.claim(
                    rnd, player_round, fee_bps, caller,
                    events=DatabaseEventSink(db, rnd.id),
                )
                if receipt.fee:
                    self._credit(db, receipt.caller, receipt.fee)
                if receipt.reward:
                    self._credit(db, receipt.player, receipt.reward)
            return receipt

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_round(self, round_id: UUID) -> Round:
        with get_db_context(self._session_factory) as db:
            return self._load_round(db, round_id)

    def get_player_round(
        self,
        round_id: UUID,
        player: str,
        round_index: int | None = None,
    ) -> PlayerRound:
        with get_db_context(self._session_factory) as db:
            rnd = self._load_round(db, round_id)
            return self._load_player_round(db, rnd, player, round_index)

    def list_rounds(self) -> list[Round]:
        with get_db_context(self._session_factory) as db:
            # created_at has one-second resolution on SQLite
            stmt = select(Round).order_by(Round.created_at, Round.id)
            return list(db.execute(stmt).scalars().all())

    def list_events(
        self,
        round_id: UUID,
        kind: str | None = None,
    ) -> list[BetPlaced | RoundClosed | Claimed]:
        with get_db_context(self._session_factory) as db:
            self._load_round(db, round_id)
            return read_events(db, round_id, kind)
