"""Simple bot arena for Whist."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Callable, Dict, Iterable, Optional, Sequence

from whist.cards import Card
from whist.game import TEAMS, WhistGame
from whist.rules_schema import SEAT_COUNT, RuleSet, load_rules
from whist.view import SeatView

from .base import BotStrategy
from .heuristic import HeuristicBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

# Factories take (seat, seed); deterministic bots ignore the seed.
BOT_REGISTRY: Dict[str, Callable[[int, Optional[int]], BotStrategy]] = {
    "heuristic": lambda seat, seed: HeuristicBot(seat),
    "random": lambda seat, seed: RandomBot(seat, seed=seed),
    "first": lambda seat, seed: BotStrategy(seat),
}


def play_turn(game: WhistGame, bots: Sequence[BotStrategy]) -> Card:
    """Ask the bot on turn for a card and submit it to the engine."""
    seat = game.current_player
    index = bots[seat].choose_card(SeatView(game, seat))
    return game.play_card(seat, index)


def choose_trump(game: WhistGame, bots: Sequence[BotStrategy]) -> None:
    seat = game.rules.first_player
    game.set_trump(bots[seat].choose_trump(SeatView(game, seat)))


def play_match(
    bots: Sequence[BotStrategy],
    *,
    seed: Optional[int] = None,
    rules: Optional[RuleSet] = None,
) -> dict:
    if len(bots) != SEAT_COUNT:
        raise ValueError(f"Exactly {SEAT_COUNT} bots are required.")
    game = WhistGame(rng=Random(seed), rules=rules)
    game.start()
    choose_trump(game, bots)
    while game.is_started:
        play_turn(game, bots)

    return {
        "winning_team": game.winning_team,
        "trump": str(game.trump),
        "team_tricks": [game.team_tricks(team) for team in range(len(TEAMS))],
        "tricks": [game.get_tricks(seat) for seat in range(SEAT_COUNT)],
        "tricks_played": len(game.trick_history),
    }


def run_matches(
    bot_names: Sequence[str],
    *,
    n_matches: int = 10,
    seed: Optional[int] = None,
    rules: Optional[RuleSet] = None,
) -> dict:
    master = Random(seed)
    wins = [0, 0]
    history = []
    for _ in range(n_matches):
        bots = [
            BOT_REGISTRY[name](seat, master.randrange(2**32))
            for seat, name in enumerate(bot_names)
        ]
        result = play_match(bots, seed=master.randrange(2**32), rules=rules)
        wins[result["winning_team"]] += 1
        history.append(result)
        logger.debug("Match result: %s", result)
    return {"wins": wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run automated Whist matches.")
    parser.add_argument(
        "--bots",
        nargs=SEAT_COUNT,
        default=["heuristic", "random", "heuristic", "random"],
        choices=BOT_REGISTRY.keys(),
        metavar="BOT",
        help=f"Bot per seat, one of: {', '.join(BOT_REGISTRY)}.",
    )
    parser.add_argument("--n", type=int, default=10, help="Number of matches to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--rules", default=None, help="Path to a JSON rules file.")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    rules = load_rules(args.rules) if args.rules else None
    results = run_matches(args.bots, n_matches=args.n, seed=args.seed, rules=rules)

    print(f"Seats: {', '.join(args.bots)}")
    print(f"Team wins after {args.n} matches: seats 0/2 = {results['wins'][0]}, seats 1/3 = {results['wins'][1]}")


if __name__ == "__main__":
    main()
