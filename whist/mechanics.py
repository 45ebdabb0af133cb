"""Legal move generation for Whist."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .cards import Card, Suit
from .trick import Trick


def awaiting_follow(trick: Optional[Trick]) -> bool:
    """Return True while a trick has been led but not completed."""
    return trick is not None and not trick.is_empty() and not trick.is_full()


def must_follow(hand: Sequence[Card], trick: Optional[Trick]) -> Optional[Suit]:
    """Return the suit the hand is obliged to play, if any.

    Only the lead suit constrains a play; holding trump does not.
    """
    if not awaiting_follow(trick):
        return None
    assert trick is not None
    led = trick.lead_suit
    if any(card.suit is led for card in hand):
        return led
    return None


def is_legal(hand: Sequence[Card], index: int, trick: Optional[Trick]) -> bool:
    if index < 0 or index >= len(hand):
        return False
    required = must_follow(hand, trick)
    return required is None or hand[index].suit is required


def legal_moves(hand: Sequence[Card], trick: Optional[Trick]) -> List[int]:
    """Return the hand indices that may legally be played, in hand order."""
    required = must_follow(hand, trick)
    return [
        index
        for index, card in enumerate(hand)
        if required is None or card.suit is required
    ]
