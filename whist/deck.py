"""Deck creation utilities for Whist."""

from __future__ import annotations

from random import Random
from typing import List, Optional, Sequence

from .cards import Card, Suit, RANK_ORDER

DECK_SIZE = 52


def build_deck() -> List[Card]:
    """Return the ordered 52-card deck."""
    return [Card(suit, rank) for suit in Suit for rank in RANK_ORDER]


def shuffled_deck(rng: Optional[Random] = None) -> List[Card]:
    """Return a uniformly shuffled deck drawn from ``rng``."""
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return cards


def validate_deck(cards: Sequence[Card]) -> List[Card]:
    """Return a copy of ``cards`` after checking it is one complete deck."""
    cards = list(cards)
    if len(cards) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")
    if set(cards) != set(build_deck()):
        raise ValueError("Deck must contain each card exactly once.")
    return cards
