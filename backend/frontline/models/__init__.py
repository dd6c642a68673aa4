"""Database models module."""

from frontline.models.account import Account
from frontline.models.event import EventRecord
from frontline.models.player_round import PlayerRound
from frontline.models.round import Round

__all__ = [
    "Account",
    "EventRecord",
    "PlayerRound",
    "Round",
]
