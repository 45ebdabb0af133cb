"""Card-related data structures and helpers for Whist."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(Enum):
    TWO = auto()
    THREE = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Rank order from lowest to highest for trick resolution.
RANK_ORDER: list[Rank] = list(Rank)

# Face value used to compare cards of the same suit, ace high.
RANK_VALUES: dict[Rank, int] = {rank: index + 2 for index, rank in enumerate(RANK_ORDER)}

RANK_SYMBOLS: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]} of {self.suit}"


def card_value(card: Card) -> int:
    """Return the 2..14 value used for ordering cards within a suit."""
    return RANK_VALUES[card.rank]


def parse_suit(value: Suit | str) -> Suit:
    if isinstance(value, Suit):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown suit: {value!r}")
    try:
        return Suit[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown suit: {value!r}") from None


def beats(challenger: Card, current: Card, trump: Optional[Suit]) -> bool:
    """Return True if challenger takes over the current winning card.

    A trump beats any non-trump card; otherwise only a higher card of the
    current winner's suit wins. Cards of any other suit never win, so with
    no trump set the highest card of the lead suit takes the trick.
    """
    if trump is not None and challenger.suit is trump and current.suit is not trump:
        return True
    if challenger.suit is current.suit:
        return card_value(challenger) > card_value(current)
    return False


def serialize_card(card: Card) -> dict[str, str]:
    return {"suit": card.suit.name.lower(), "rank": card.rank.name.lower()}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    suit_name = payload["suit"].upper()
    rank_name = payload["rank"].upper()
    return Card(Suit[suit_name], Rank[rank_name])


def card_label(card: Card) -> str:
    return f"{card.rank.name.title()} of {card.suit.name.title()}"
