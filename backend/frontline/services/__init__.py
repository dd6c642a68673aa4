"""Service layer exports."""

from frontline.services.event_log import DatabaseEventSink, read_events
from frontline.services.exceptions import InsufficientBalance, RecordNotFound, RoundConflict
from frontline.services.game_service import GameService

__all__ = [
    "GameService",
    "DatabaseEventSink",
    "read_events",
    "InsufficientBalance",
    "RecordNotFound",
    "RoundConflict",
]
