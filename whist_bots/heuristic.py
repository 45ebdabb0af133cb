"""Heuristic bot: lead strong, win cheaply, shed low."""

from __future__ import annotations

from typing import List, Optional, Sequence

from whist.cards import Card, Suit, beats, card_value
from whist.mechanics import awaiting_follow
from whist.trick import Trick
from whist.view import PlayerView

from .base import BotStrategy


def _highest(hand: Sequence[Card], indices: Sequence[int]) -> int:
    return max(indices, key=lambda i: card_value(hand[i]))


def _lowest(hand: Sequence[Card], indices: Sequence[int]) -> int:
    return min(indices, key=lambda i: card_value(hand[i]))


def _split_trump(hand: Sequence[Card], trump: Optional[Suit]) -> tuple[List[int], List[int]]:
    plain = [i for i, card in enumerate(hand) if card.suit is not trump]
    trumps = [i for i, card in enumerate(hand) if card.suit is trump]
    return plain, trumps


class HeuristicBot(BotStrategy):
    """Stateless card picker recomputed from the view on every call.

    Ties go to the card that comes first in the hand.
    """

    name = "Heuristic"

    def choose_card(self, view: PlayerView) -> int:
        hand = view.hand()
        trick = view.current_trick()
        trump = view.trump()
        if not awaiting_follow(trick):
            return self._lead(hand, trump)
        assert trick is not None
        return self._follow(hand, trick, trump)

    def _lead(self, hand: Sequence[Card], trump: Optional[Suit]) -> int:
        # Keep trump back for later tricks.
        plain, trumps = _split_trump(hand, trump)
        return _highest(hand, plain or trumps)

    def _follow(self, hand: Sequence[Card], trick: Trick, trump: Optional[Suit]) -> int:
        led = trick.lead_suit
        in_suit = [i for i, card in enumerate(hand) if card.suit is led]
        if in_suit:
            _, best = trick.winning_play(trump)
            winners = [i for i in in_suit if beats(hand[i], best, trump)]
            return _lowest(hand, winners or in_suit)

        plain, trumps = _split_trump(hand, trump)
        return _lowest(hand, plain or trumps)
