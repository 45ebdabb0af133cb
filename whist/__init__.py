"""Core rules engine package for partnership Whist."""

__all__ = [
    "cards",
    "deck",
    "trick",
    "mechanics",
    "rules_schema",
    "game",
    "view",
    "service",
]
