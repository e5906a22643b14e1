"""Arabic cursive joining (rules R1 to R7) aware of bidi embedding levels."""

from __future__ import annotations

from collections.abc import Sequence

from .joining_types import (
    arab_shapes,
    is_join_skipped,
    is_joining_type_g,
    joins_following_mask,
    joins_preceding_mask,
)
from .types import SENTINEL, CharType, is_explicit_or_bn

__all__ = ["join_arabic"]


def _levels_match(a: int, b: int) -> bool:
    return a == b or a == SENTINEL or b == SENTINEL


def join_arabic(
    bidi_types: Sequence[CharType],
    embedding_levels: Sequence[int],
    ar_props: Sequence[int],
) -> list[int]:
    """Resolve Arabic joining between neighbouring characters.

    ``ar_props`` holds the joining types of the characters; the result is a
    new list of Arabic properties whose joining bits reflect which neighbours
    each character actually joins to.  Characters at different embedding
    levels never join; explicit codes and boundary neutrals match any level.
    """
    if not len(bidi_types) == len(embedding_levels) == len(ar_props):
        raise ValueError("bidi_types, embedding_levels and ar_props differ in length")

    props = [int(p) for p in ar_props]

    saved = 0
    saved_level = SENTINEL
    saved_shapes = False
    saved_following = 0
    joins = False

    for i, (char_type, embedding_level) in enumerate(zip(bidi_types, embedding_levels)):
        if is_joining_type_g(props[i]):
            continue

        disjoin = False
        shapes = arab_shapes(props[i])
        level = SENTINEL if is_explicit_or_bn(char_type) else embedding_level

        if joins and not _levels_match(saved_level, level):
            disjoin = True
            joins = False

        skipped = is_join_skipped(props[i])
        if not skipped:
            preceding = joins_preceding_mask(level)
            if not joins:
                if shapes:
                    props[i] &= ~preceding
            elif not props[i] & preceding:
                disjoin = True
            else:
                # Skipped characters in between take the joining of their
                # neighbours, so marks can later sit on a tatweel.
                for j in range(saved + 1, i):
                    props[j] |= preceding | saved_following

        if disjoin and saved_shapes:
            props[saved] &= ~saved_following

        if not skipped:
            saved = i
            saved_level = level
            saved_shapes = shapes
            saved_following = joins_following_mask(level)
            joins = bool(props[i] & saved_following)

    if joins and saved_shapes:
        props[saved] &= ~saved_following

    return props