"""Convenience service layer for UI consumers."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Optional

from .cards import card_label, deserialize_card, serialize_card
from .game import TEAMS, InvalidCardIndex, WhistGame, team_of
from .mechanics import legal_moves
from .rules_schema import SEAT_COUNT, RuleSet


@dataclass
class TrickPlayView:
    player: int
    card: dict
    label: str


@dataclass
class TrickView:
    lead_suit: Optional[str]
    plays: list[TrickPlayView]
    winner: Optional[int]


@dataclass
class TableView:
    started: bool
    finished: bool
    perspective: int
    team: int
    current_player: int
    trump: Optional[str]
    player_names: list[str]
    hand: list[dict]
    hand_labels: list[str]
    legal_moves: list[int]
    hand_sizes: list[int]
    tricks: list[int]
    team_tricks: list[int]
    trick: Optional[TrickView]
    tricks_played: int
    winning_team: Optional[int]


class MatchService:
    """Facade around WhistGame for UI consumers."""

    def __init__(
        self,
        game: Optional[WhistGame] = None,
        *,
        seed: Optional[int] = None,
        rules: Optional[RuleSet] = None,
    ) -> None:
        self.game = game or WhistGame(rng=Random(seed), rules=rules)

    # Actions -----------------------------------------------------------

    def start(self, perspective: int = 0) -> TableView:
        self.game.start()
        return self.get_table_view(perspective)

    def set_trump(self, suit: str, perspective: int = 0) -> TableView:
        self.game.set_trump(suit)
        return self.get_table_view(perspective)

    def play_card(self, player: int, index: int) -> TableView:
        self.game.play_card(player, index)
        return self.get_table_view(player)

    def play_serialized_card(self, player: int, card_payload: dict) -> TableView:
        card = deserialize_card(card_payload)
        hand = self.game.get_hand(player)
        if card not in hand:
            raise InvalidCardIndex(f"{card_label(card)} is not in the hand")
        return self.play_card(player, hand.index(card))

    # Views -------------------------------------------------------------

    def get_table_view(self, perspective: int = 0) -> TableView:
        game = self.game
        hand = game.get_hand(perspective)
        trick = game.get_current_trick()

        trick_view: Optional[TrickView] = None
        if trick is not None:
            trick_view = TrickView(
                lead_suit=str(trick.lead_suit) if trick.lead_suit else None,
                plays=[
                    TrickPlayView(player=p, card=serialize_card(c), label=card_label(c))
                    for p, c in trick.plays
                ],
                winner=trick.winner,
            )

        moves: list[int] = []
        if game.is_started and game.current_player == perspective:
            moves = legal_moves(hand, trick)

        return TableView(
            started=game.is_started,
            finished=game.is_finished,
            perspective=perspective,
            team=team_of(perspective),
            current_player=game.current_player,
            trump=str(game.trump) if game.trump else None,
            player_names=[game.get_player_name(seat) for seat in range(SEAT_COUNT)],
            hand=[serialize_card(card) for card in hand],
            hand_labels=[card_label(card) for card in hand],
            legal_moves=moves,
            hand_sizes=[len(game.get_hand(seat)) for seat in range(SEAT_COUNT)],
            tricks=[game.get_tricks(seat) for seat in range(SEAT_COUNT)],
            team_tricks=[game.team_tricks(team) for team in range(len(TEAMS))],
            trick=trick_view,
            tricks_played=len(game.trick_history),
            winning_team=game.winning_team,
        )
