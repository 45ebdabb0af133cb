"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .cards import Card, Suit, beats

PLAYERS_PER_TRICK = 4


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


@dataclass
class Trick:
    plays: List[Tuple[int, Card]] = field(default_factory=list)
    winner: Optional[int] = None

    @property
    def lead_suit(self) -> Optional[Suit]:
        return self.plays[0][1].suit if self.plays else None

    def is_empty(self) -> bool:
        return not self.plays

    def is_full(self) -> bool:
        return len(self.plays) == PLAYERS_PER_TRICK

    def add_play(self, seat: int, card: Card) -> None:
        if self.is_full():
            raise TrickError("Trick already complete.")
        if any(player == seat for player, _ in self.plays):
            raise TrickError(f"Seat {seat} already played in this trick.")
        self.plays.append((seat, card))

    def cards(self) -> List[Card]:
        return [card for _, card in self.plays]

    def seats(self) -> List[int]:
        return [seat for seat, _ in self.plays]

    def winning_play(self, trump: Optional[Suit]) -> Tuple[int, Card]:
        """Return the (seat, card) currently winning, scanning in play order."""
        if not self.plays:
            raise TrickError("Cannot determine winner on empty trick.")
        winning_seat, winning_card = self.plays[0]
        for seat, card in self.plays[1:]:
            if beats(card, winning_card, trump):
                winning_seat, winning_card = seat, card
        return winning_seat, winning_card

    def resolve(self, trump: Optional[Suit]) -> int:
        if not self.is_full():
            raise TrickError("Cannot determine winner of incomplete trick.")
        self.winner, _ = self.winning_play(trump)
        return self.winner

    def copy(self) -> "Trick":
        return Trick(plays=list(self.plays), winner=self.winner)
