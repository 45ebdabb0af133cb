"""Match orchestration for partnership Whist.

Four seats play in fixed order; seats 0/2 and 1/3 are partners. Every trick
is led freely, the other seats must follow the lead suit when they can, a
trump (once chosen) beats every other suit and the highest card of the
winning suit takes the trick. The winner leads next and the first team to
reach the target number of tricks wins the match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import Card, Suit, parse_suit
from .deck import shuffled_deck, validate_deck
from .mechanics import awaiting_follow, must_follow
from .rules_schema import DEFAULT_RULES, SEAT_COUNT, TRICKS_PER_DEAL, RuleSet
from .trick import Trick

logger = logging.getLogger(__name__)

TEAMS: Tuple[Tuple[int, int], Tuple[int, int]] = ((0, 2), (1, 3))


class GameError(RuntimeError):
    """Base class for rejected engine operations."""


class AlreadyStarted(GameError):
    """Raised when dealing a match that was already dealt."""


class NotStarted(GameError):
    """Raised when mutating a match that is not in progress."""


class TrumpAlreadySet(GameError):
    """Raised when assigning trump a second time."""


class OutOfTurn(GameError):
    """Raised when a seat plays while another seat is on turn."""


class InvalidCardIndex(GameError, IndexError):
    """Raised when a hand index is outside the current hand."""


class MustFollowLeadSuit(GameError):
    """Raised when a seat able to follow the lead suit plays another suit."""


@dataclass
class Player:
    seat: int
    name: str
    hand: List[Card] = field(default_factory=list)
    tricks: int = 0


def team_of(seat: int) -> int:
    """Return 0 for seats 0/2 and 1 for seats 1/3."""
    return seat % 2


class WhistGame:
    """Own the state of a single Whist match."""

    def __init__(
        self,
        rng: Optional[Random] = None,
        rules: Optional[RuleSet] = None,
        deck: Optional[Sequence[Card]] = None,
    ) -> None:
        self.rules = rules or DEFAULT_RULES
        self._deck = validate_deck(deck) if deck is not None else shuffled_deck(rng)
        self._players = [Player(seat=seat, name=name) for seat, name in enumerate(self.rules.seat_names)]
        self._current_trick: Optional[Trick] = None
        self._trick_history: List[Trick] = []
        self._trump: Optional[Suit] = None
        self._current_player = self.rules.first_player
        self._started = False
        self._winning_team: Optional[int] = None

    # Lifecycle ---------------------------------------------------------

    def start(self) -> None:
        """Deal thirteen cards to each seat, one at a time in seat order."""
        if self._started:
            raise AlreadyStarted("Game has already started")
        if self._winning_team is not None:
            raise AlreadyStarted("Game has already been played")

        for _ in range(TRICKS_PER_DEAL):
            for player in self._players:
                player.hand.append(self._deck.pop())

        self._started = True
        logger.info("Game started; each player holds %d cards.", TRICKS_PER_DEAL)

    def set_trump(self, suit: Suit | str) -> None:
        """Fix the trump suit for the rest of the match."""
        if not self._started:
            raise NotStarted("Game has not started")
        if self._trump is not None:
            raise TrumpAlreadySet("Trump suit has already been set")
        self._trump = parse_suit(suit)
        logger.info("Trump suit set to %s.", self._trump)

    def play_card(self, seat: int, hand_index: int) -> Card:
        """Play the card at ``hand_index`` from ``seat``'s hand.

        Every check runs before any state changes, so a rejected play leaves
        the match exactly as it was.
        """
        if not self._started:
            raise NotStarted("Game has not started")
        if seat != self._current_player:
            raise OutOfTurn("Not your turn")

        player = self._players[seat]
        if hand_index < 0 or hand_index >= len(player.hand):
            raise InvalidCardIndex("Invalid card index")

        card = player.hand[hand_index]
        required = must_follow(player.hand, self._current_trick)
        if required is not None and card.suit is not required:
            raise MustFollowLeadSuit("Must follow the lead suit")

        if not awaiting_follow(self._current_trick):
            self._current_trick = Trick()
        trick = self._current_trick
        assert trick is not None

        del player.hand[hand_index]
        trick.add_play(seat, card)
        logger.debug("%s played %s.", player.name, card)

        if trick.is_full():
            self._complete_trick(trick)
        else:
            self._current_player = (seat + 1) % SEAT_COUNT
        return card

    def _complete_trick(self, trick: Trick) -> None:
        winner = trick.resolve(self._trump)
        self._players[winner].tricks += 1
        self._trick_history.append(trick)
        self._current_player = winner
        logger.info("Trick won by %s.", self._players[winner].name)
        self._check_match_end()

    def _check_match_end(self) -> None:
        totals = [self.team_tricks(team) for team in range(len(TEAMS))]
        for team, total in enumerate(totals):
            if total >= self.rules.tricks_to_win:
                self._end_match(team)
                return
        # A target above seven can go unreached; the deal still ends the match.
        if len(self._trick_history) == TRICKS_PER_DEAL:
            self._end_match(0 if totals[0] > totals[1] else 1)

    def _end_match(self, team: int) -> None:
        self._winning_team = team
        self._started = False
        names = " and ".join(self._players[seat].name for seat in TEAMS[team])
        logger.info("Team %d (%s) wins the game.", team + 1, names)

    # Accessors ---------------------------------------------------------

    def _player(self, seat: int) -> Player:
        if not 0 <= seat < SEAT_COUNT:
            raise IndexError(f"Seat must be between 0 and {SEAT_COUNT - 1}, got {seat}.")
        return self._players[seat]

    def get_hand(self, seat: int) -> List[Card]:
        return list(self._player(seat).hand)

    def get_current_trick(self) -> Optional[Trick]:
        """Return a copy of the live or most recently completed trick."""
        return self._current_trick.copy() if self._current_trick is not None else None

    def get_tricks(self, seat: int) -> int:
        return self._player(seat).tricks

    def get_player_name(self, seat: int) -> str:
        return self._player(seat).name

    def team_tricks(self, team: int) -> int:
        return sum(self._players[seat].tricks for seat in TEAMS[team])

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def trump(self) -> Optional[Suit]:
        return self._trump

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_finished(self) -> bool:
        return self._winning_team is not None

    @property
    def winning_team(self) -> Optional[int]:
        return self._winning_team

    @property
    def deck_size(self) -> int:
        return len(self._deck)

    @property
    def trick_history(self) -> Tuple[Trick, ...]:
        return tuple(trick.copy() for trick in self._trick_history)
