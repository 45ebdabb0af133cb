"""Common bot strategy interfaces."""

from __future__ import annotations

from whist.cards import Suit
from whist.mechanics import legal_moves
from whist.view import PlayerView


class BotStrategy:
    """Base class for bot policies.

    A bot only ever sees a ``PlayerView`` and answers with a hand index; the
    driver submits that index to the engine, which stays the judge of
    legality.
    """

    name: str = "BaseBot"

    def __init__(self, seat: int) -> None:
        self.seat = seat

    def choose_trump(self, view: PlayerView) -> Suit:
        """Return the suit this bot holds the most cards of."""
        hand = view.hand()
        return max(Suit, key=lambda suit: sum(1 for card in hand if card.suit is suit))

    def choose_card(self, view: PlayerView) -> int:
        """Return the hand index to play."""
        legal = legal_moves(view.hand(), view.current_trick())
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0]
