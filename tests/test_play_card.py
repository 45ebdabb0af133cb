import pytest

from whist.cards import Card, Rank, Suit
from whist.game import InvalidCardIndex, MustFollowLeadSuit, NotStarted, OutOfTurn, WhistGame


def _snapshot(game):
    return (
        [game.get_hand(seat) for seat in range(4)],
        game.get_current_trick(),
        game.current_player,
        [game.get_tricks(seat) for seat in range(4)],
    )


def test_play_before_start_fails():
    game = WhistGame()
    with pytest.raises(NotStarted):
        game.play_card(0, 0)


def test_out_of_turn_leaves_hands_unchanged(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands, trump=Suit.HEARTS)
    before = _snapshot(game)
    with pytest.raises(OutOfTurn, match="Not your turn"):
        game.play_card(1, 0)
    assert _snapshot(game) == before


@pytest.mark.parametrize("index", [13, -1])
def test_index_outside_hand_fails(make_game, clubs_lead_hands, index):
    game = make_game(clubs_lead_hands)
    with pytest.raises(InvalidCardIndex, match="Invalid card index"):
        game.play_card(0, index)
    assert len(game.get_hand(0)) == 13


def test_first_card_starts_a_trick(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands)
    card = game.play_card(0, 3)
    trick = game.get_current_trick()
    assert card == Card(Suit.SPADES, Rank.FOUR)
    assert trick.plays == [(0, card)]
    assert trick.lead_suit is Suit.SPADES
    assert game.current_player == 1
    assert len(game.get_hand(0)) == 12


def test_must_follow_lead_suit(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands, trump=Suit.HEARTS)
    game.play_card(0, 0)
    before = _snapshot(game)
    with pytest.raises(MustFollowLeadSuit, match="Must follow the lead suit"):
        game.play_card(1, 1)
    assert _snapshot(game) == before
    game.play_card(1, 0)
    assert game.get_current_trick().cards() == [Card(Suit.CLUBS, Rank.FIVE), Card(Suit.CLUBS, Rank.KING)]


def test_trump_does_not_excuse_following(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands, trump=Suit.HEARTS)
    for seat in range(3):
        game.play_card(seat, 0)
    ace_of_hearts = game.get_hand(3).index(Card(Suit.HEARTS, Rank.ACE))
    with pytest.raises(MustFollowLeadSuit):
        game.play_card(3, ace_of_hearts)


def test_void_player_may_play_anything(make_game, trump_cut_hands):
    game = make_game(trump_cut_hands, trump=Suit.HEARTS)
    game.play_card(0, 0)
    game.play_card(1, 0)
    assert game.get_current_trick().cards()[-1] == Card(Suit.CLUBS, Rank.KING)


def test_trump_wins_trick(make_game, trump_cut_hands):
    game = make_game(trump_cut_hands, trump=Suit.HEARTS)
    for seat in range(4):
        game.play_card(seat, 0)
    trick = game.get_current_trick()
    assert trick.cards() == [
        Card(Suit.SPADES, Rank.FIVE),
        Card(Suit.CLUBS, Rank.KING),
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.SPADES, Rank.ACE),
    ]
    assert trick.winner == 2
    assert game.current_player == 2
    assert [game.get_tricks(seat) for seat in range(4)] == [0, 0, 1, 0]


def test_highest_lead_card_wins_and_leads_next(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands, trump=Suit.HEARTS)
    for seat in range(4):
        game.play_card(seat, 0)
    assert game.get_current_trick().winner == 1
    assert game.current_player == 1
    assert [game.get_tricks(seat) for seat in range(4)] == [0, 1, 0, 0]
    assert len(game.trick_history) == 1

    # The winner leads a fresh trick with any card.
    with pytest.raises(OutOfTurn):
        game.play_card(0, 0)
    led = game.play_card(1, 5)
    trick = game.get_current_trick()
    assert trick.plays == [(1, led)]
    assert trick.winner is None
    assert game.current_player == 2


def test_turn_advances_clockwise_from_winner(make_game, clubs_lead_hands):
    game = make_game(clubs_lead_hands)
    for seat in range(4):
        game.play_card(seat, 0)
    game.play_card(1, 0)
    assert game.current_player == 2
    game.play_card(2, 0)
    assert game.current_player == 3
    game.play_card(3, 1)
    assert game.current_player == 0
