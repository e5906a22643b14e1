"""Arabic joining types and the bit-mask queries built on them."""

from __future__ import annotations

import enum

from .types import level_is_rtl

__all__ = [
    "MASK_JOINS_RIGHT",
    "MASK_JOINS_LEFT",
    "MASK_ARAB_SHAPES",
    "MASK_TRANSPARENT",
    "MASK_IGNORED",
    "MASK_LIGATURED",
    "JoiningType",
    "joining_type_name",
    "char_from_joining_type",
    "is_joining_type_u",
    "is_joining_type_r",
    "is_joining_type_d",
    "is_joining_type_c",
    "is_joining_type_l",
    "is_joining_type_t",
    "is_joining_type_g",
    "is_joining_type_rc",
    "is_joining_type_lc",
    "joins_right",
    "joins_left",
    "arab_shapes",
    "is_join_skipped",
    "is_join_base_shapes",
    "joins_preceding_mask",
    "joins_following_mask",
    "join_shape",
]

MASK_JOINS_RIGHT = 0x01
MASK_JOINS_LEFT = 0x02
MASK_ARAB_SHAPES = 0x04
MASK_TRANSPARENT = 0x08
MASK_IGNORED = 0x10
MASK_LIGATURED = 0x20

_SKIP_MASKS = MASK_TRANSPARENT | MASK_IGNORED
_JOIN_MASKS = MASK_JOINS_RIGHT | MASK_JOINS_LEFT


class JoiningType(enum.IntEnum):
    """Primary Arabic joining class, encoded as a combination of mask bits."""

    U = 0
    R = MASK_JOINS_RIGHT | MASK_ARAB_SHAPES
    D = MASK_JOINS_RIGHT | MASK_JOINS_LEFT | MASK_ARAB_SHAPES
    C = MASK_JOINS_RIGHT | MASK_JOINS_LEFT
    T = MASK_TRANSPARENT | MASK_ARAB_SHAPES
    L = MASK_JOINS_LEFT | MASK_ARAB_SHAPES
    G = MASK_IGNORED


def is_joining_type_u(prop: int) -> bool:
    """Non-joining."""
    return (prop & (_SKIP_MASKS | _JOIN_MASKS)) == 0


def is_joining_type_r(prop: int) -> bool:
    """Right-joining."""
    return (prop & (_SKIP_MASKS | _JOIN_MASKS)) == MASK_JOINS_RIGHT


def is_joining_type_d(prop: int) -> bool:
    """Dual-joining."""
    mask = _SKIP_MASKS | _JOIN_MASKS | MASK_ARAB_SHAPES
    return (prop & mask) == (_JOIN_MASKS | MASK_ARAB_SHAPES)


def is_joining_type_c(prop: int) -> bool:
    """Join-causing."""
    mask = _SKIP_MASKS | _JOIN_MASKS | MASK_ARAB_SHAPES
    return (prop & mask) == _JOIN_MASKS


def is_joining_type_l(prop: int) -> bool:
    """Left-joining."""
    return (prop & (_SKIP_MASKS | _JOIN_MASKS)) == MASK_JOINS_LEFT


def is_joining_type_t(prop: int) -> bool:
    """Transparent."""
    return (prop & _SKIP_MASKS) == MASK_TRANSPARENT


def is_joining_type_g(prop: int) -> bool:
    """Ignored."""
    return (prop & _SKIP_MASKS) == MASK_IGNORED


def is_joining_type_rc(prop: int) -> bool:
    """Right join-causing (derived class)."""
    return (prop & (_SKIP_MASKS | MASK_JOINS_RIGHT)) == MASK_JOINS_RIGHT


def is_joining_type_lc(prop: int) -> bool:
    """Left join-causing (derived class)."""
    return (prop & (_SKIP_MASKS | MASK_JOINS_LEFT)) == MASK_JOINS_LEFT


def joins_right(prop: int) -> bool:
    """May join to the right: R, D, C."""
    return bool(prop & MASK_JOINS_RIGHT)


def joins_left(prop: int) -> bool:
    """May join to the left: L, D, C."""
    return bool(prop & MASK_JOINS_LEFT)


def arab_shapes(prop: int) -> bool:
    """May take an Arabic shape: R, D, L, T."""
    return bool(prop & MASK_ARAB_SHAPES)


def is_join_skipped(prop: int) -> bool:
    """Skipped while joining: T, G."""
    return bool(prop & _SKIP_MASKS)


def is_join_base_shapes(prop: int) -> bool:
    """A base character that will be shaped: R, D, L."""
    return (prop & (_SKIP_MASKS | MASK_ARAB_SHAPES)) == MASK_ARAB_SHAPES


def joins_preceding_mask(level: int) -> int:
    """Mask for joining with the logically preceding character at a level."""
    return MASK_JOINS_RIGHT if level_is_rtl(level) else MASK_JOINS_LEFT


def joins_following_mask(level: int) -> int:
    """Mask for joining with the logically following character at a level."""
    return MASK_JOINS_LEFT if level_is_rtl(level) else MASK_JOINS_RIGHT


def join_shape(prop: int) -> int:
    """The joining bits of an Arabic property."""
    return prop & _JOIN_MASKS


def joining_type_name(joining_type: int) -> str:
    """Return the short name of a joining type, or "?" if it is not one."""
    try:
        return JoiningType(joining_type).name
    except ValueError:
        return "?"


_SYMBOLS = (
    (is_joining_type_u, "|"),
    (is_joining_type_r, "<"),
    (is_joining_type_d, "+"),
    (is_joining_type_c, "-"),
    (is_joining_type_t, "^"),
    (is_joining_type_l, ">"),
    (is_joining_type_g, "~"),
)


def char_from_joining_type(joining_type: int, visual: bool) -> str:
    """Return the debug symbol of a joining property.

    In a visual context, one-sided joining directions are swapped.
    """
    if visual and joins_right(joining_type) != joins_left(joining_type):
        joining_type ^= _JOIN_MASKS
    for predicate, symbol in _SYMBOLS:
        if predicate(joining_type):
            return symbol
    return "?"