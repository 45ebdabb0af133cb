"""Validation schema for Whist match configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, field_validator

SEAT_COUNT = 4
TRICKS_PER_DEAL = 13


class RuleSet(BaseModel):
    tricks_to_win: int = Field(
        7,
        ge=1,
        le=TRICKS_PER_DEAL,
        description="Tricks a team must take to win the match.",
    )
    first_player: int = Field(0, ge=0, lt=SEAT_COUNT, description="Seat that leads the first trick.")
    seat_names: list[str] = Field(
        default_factory=lambda: ["North", "East", "South", "West"],
        description="Display names by seat; seats 0/2 and 1/3 are partners.",
    )

    @field_validator("seat_names")
    @classmethod
    def validate_seat_names(cls, value: list[str]) -> list[str]:
        if len(value) != SEAT_COUNT:
            raise ValueError(f"Exactly {SEAT_COUNT} seat names are required.")
        names = [name.strip() for name in value]
        if any(not name for name in names):
            raise ValueError("Seat names must not be empty.")
        return names


DEFAULT_RULES = RuleSet()


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read a JSON rules file into a validated ``RuleSet``."""
    return RuleSet.model_validate_json(Path(path).read_text(encoding="utf-8"))
