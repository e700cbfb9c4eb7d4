"""Logical expressions and their expected truth tables, by difficulty level."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LogicalExpression:
    """An expression with its values for (A, B) = VV, VF, FV, FF; 1 is true."""

    text: str
    truth_table: tuple[int, int, int, int]


EASY = (
    LogicalExpression("A ∧ B", (1, 0, 0, 0)),
    LogicalExpression("A ∨ B", (1, 1, 1, 0)),
)

MEDIUM = (
    LogicalExpression("A ∧ ¬B", (0, 1, 0, 0)),
    LogicalExpression("¬A ∨ B", (1, 0, 1, 1)),
    LogicalExpression("(A ∧ B) ∨ A", (1, 1, 0, 0)),
    LogicalExpression("A → B", (1, 0, 1, 1)),
)

HARD = (
    LogicalExpression("¬(A ∨ B)", (0, 0, 0, 1)),
    LogicalExpression("(A ∧ B) ∨ ¬A", (1, 0, 1, 1)),
    LogicalExpression("¬(A ∧ B) ∧ B", (0, 0, 1, 0)),
    LogicalExpression("A ↔ B", (1, 0, 0, 1)),
)


def expressions_for_level(level: int) -> tuple[LogicalExpression, ...]:
    """Return the pool for a level; anything other than 1 or 2 is the hard pool."""
    if level == 1:
        return EASY
    if level == 2:
        return MEDIUM
    return HARD


def random_expression(level: int, rng: Optional[random.Random] = None) -> LogicalExpression:
    """Pick an expression at random from the level's pool."""
    chooser = rng if rng is not None else random
    return chooser.choice(expressions_for_level(level))