"""Older convenience interfaces: global-style options and bidi mark removal."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .types import (
    CHAR_LRM,
    CHAR_RLM,
    CharType,
    Flags,
    get_bidi_type,
    is_explicit_or_bn,
    is_isolate,
)

__all__ = [
    "MAX_BIDI_LEVEL",
    "Options",
    "RemovedMarks",
    "get_type",
    "get_type_internal",
    "remove_bidi_marks",
]

MAX_BIDI_LEVEL = 125


@dataclass
class Options:
    """Shaping options, with mirroring and mark reordering on by default."""

    flags: Flags = field(default=Flags.DEFAULT | Flags.ARABIC)

    def _adjust(self, mask: Flags, state: bool) -> bool:
        self.flags = (self.flags & ~mask) | (mask if state else Flags(0))
        return bool(self.flags & mask)

    def set_mirroring(self, state: bool) -> bool:
        """Turn character mirroring on or off and return the new status."""
        return self._adjust(Flags.SHAPE_MIRRORING, state)

    def mirroring_status(self) -> bool:
        """Return whether character mirroring is on."""
        return bool(self.flags & Flags.SHAPE_MIRRORING)

    def set_reorder_nsm(self, state: bool) -> bool:
        """Turn non-spacing mark reordering on or off and return the new status."""
        return self._adjust(Flags.REORDER_NSM, state)

    def reorder_nsm_status(self) -> bool:
        """Return whether non-spacing mark reordering is on."""
        return bool(self.flags & Flags.REORDER_NSM)


@dataclass
class RemovedMarks:
    """The result of removing bidi marks from a string and its lists."""

    text: str | list[int]
    positions_to_this: list[int] | None = None
    positions_from_this: list[int] | None = None
    embedding_levels: list[int] | None = None


def get_type(ch: int | str) -> CharType:
    """Return the bidi type of a character."""
    return get_bidi_type(ch)


def get_type_internal(ch: int | str) -> CharType:
    """Return the bidi type of a character."""
    return get_bidi_type(ch)


def _is_removable(code_point: int) -> bool:
    char_type = get_bidi_type(code_point)
    return (
        is_explicit_or_bn(char_type)
        or is_isolate(char_type)
        or code_point in (CHAR_LRM, CHAR_RLM)
    )


def _check_length(name: str, values: Sequence[int] | None, length: int) -> None:
    if values is not None and len(values) != length:
        raise ValueError(f"{name} has length {len(values)}, expected {length}")


def remove_bidi_marks(
    text: str | Sequence[int],
    positions_to_this: Sequence[int] | None = None,
    positions_from_this: Sequence[int] | None = None,
    embedding_levels: Sequence[int] | None = None,
) -> RemovedMarks:
    """Remove explicit bidi codes, isolates, boundary neutrals, LRM and RLM.

    The accompanying lists are compacted alongside the string.  In the
    returned ``positions_to_this`` a position whose character was removed
    maps to -1.  A ``str`` input gives a ``str`` result; a sequence of code
    points gives a list of code points.
    """
    as_string = isinstance(text, str)
    code_points = [ord(c) for c in text] if as_string else [int(c) for c in text]
    length = len(code_points)

    _check_length("positions_to_this", positions_to_this, length)
    _check_length("positions_from_this", positions_from_this, length)
    _check_length("embedding_levels", embedding_levels, length)

    from_this: list[int] | None = None
    if positions_from_this is not None:
        from_this = list(positions_from_this)
    elif positions_to_this is not None:
        if sorted(positions_to_this) != list(range(length)):
            raise ValueError("positions_to_this is not a permutation of positions")
        from_this = [0] * length
        for i, target in enumerate(positions_to_this):
            from_this[target] = i

    kept = [i for i, cp in enumerate(code_points) if not _is_removable(cp)]

    new_code_points = [code_points[i] for i in kept]
    new_levels = (
        [embedding_levels[i] for i in kept] if embedding_levels is not None else None
    )
    new_from = [from_this[i] for i in kept] if from_this is not None else None

    new_to: list[int] | None = None
    if positions_to_this is not None:
        new_to = [-1] * length
        for k, source in enumerate(new_from):
            if not 0 <= source < length:
                raise ValueError(f"position out of range: {source}")
            new_to[source] = k

    return RemovedMarks(
        text="".join(map(chr, new_code_points)) if as_string else new_code_points,
        positions_to_this=new_to,
        positions_from_this=new_from if positions_from_this is not None else None,
        embedding_levels=new_levels,
    )