"""
Numbering scheme builder: the fixed bullet and decimal list definitions.
"""

from __future__ import annotations

from typing import List

from ..docx.descriptors import IndentSpec, NumberingLevel, NumberingScheme
from ..utils.enums import AlignmentType, LevelFormat
from .paragraphs import BULLET_REFERENCE, MAX_LIST_LEVEL, NUMBER_REFERENCE

BULLET_SYMBOLS = ("•", "o", "▪")

LEVEL_INDENT_BASE = 720
LEVEL_INDENT_STEP = 360
LEVEL_HANGING = 260


def level_indent(level: int) -> IndentSpec:
    """Indentation of list level ``level`` in twips."""
    return IndentSpec(left=LEVEL_INDENT_BASE + level * LEVEL_INDENT_STEP, hanging=LEVEL_HANGING)


def build_bullet_levels() -> List[NumberingLevel]:
    return [
        NumberingLevel(
            level=level,
            format=LevelFormat.BULLET,
            text=BULLET_SYMBOLS[level % len(BULLET_SYMBOLS)],
            alignment=AlignmentType.LEFT,
            indent=level_indent(level),
        )
        for level in range(MAX_LIST_LEVEL + 1)
    ]


def build_decimal_levels() -> List[NumberingLevel]:
    return [
        NumberingLevel(
            level=level,
            format=LevelFormat.DECIMAL,
            text=f"%{level + 1}.",
            alignment=AlignmentType.LEFT,
            indent=level_indent(level),
        )
        for level in range(MAX_LIST_LEVEL + 1)
    ]


def build_numbering_config() -> List[NumberingScheme]:
    """
    Build the two numbering schemes every exported document carries.

    Returns:
        Bullet scheme followed by decimal scheme, 9 levels each
    """
    return [
        NumberingScheme(reference=BULLET_REFERENCE, levels=build_bullet_levels()),
        NumberingScheme(reference=NUMBER_REFERENCE, levels=build_decimal_levels()),
    ]
