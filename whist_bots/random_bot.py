"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional

from whist.cards import Suit
from whist.mechanics import legal_moves
from whist.view import PlayerView

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seat: int, seed: Optional[int] = None) -> None:
        super().__init__(seat)
        self._rng = random.Random(seed)

    def choose_trump(self, view: PlayerView) -> Suit:
        return self._rng.choice(list(Suit))

    def choose_card(self, view: PlayerView) -> int:
        legal = legal_moves(view.hand(), view.current_trick())
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return self._rng.choice(legal)
