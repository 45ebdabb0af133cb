"""Read-only per-seat views consumed by bots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from .cards import Card, Suit
from .game import WhistGame
from .trick import Trick


class PlayerView(Protocol):
    """What a decision maker may observe for one seat."""

    seat: int

    def hand(self) -> List[Card]: ...

    def current_trick(self) -> Optional[Trick]: ...

    def trump(self) -> Optional[Suit]: ...


class SeatView:
    """Live view of a ``WhistGame`` from one seat's perspective."""

    def __init__(self, game: WhistGame, seat: int) -> None:
        self._game = game
        self.seat = seat

    def hand(self) -> List[Card]:
        return self._game.get_hand(self.seat)

    def current_trick(self) -> Optional[Trick]:
        return self._game.get_current_trick()

    def trump(self) -> Optional[Suit]:
        return self._game.trump


@dataclass(frozen=True)
class SnapshotView:
    """Fixed view, handy for exercising a bot without an engine."""

    seat: int
    cards: List[Card] = field(default_factory=list)
    trick: Optional[Trick] = None
    trump_suit: Optional[Suit] = None

    def hand(self) -> List[Card]:
        return list(self.cards)

    def current_trick(self) -> Optional[Trick]:
        return self.trick.copy() if self.trick is not None else None

    def trump(self) -> Optional[Suit]:
        return self.trump_suit
