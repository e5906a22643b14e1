"""Runs of characters sharing a bidi type, kept in a circular linked list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .types import NO_BRACKET, SENTINEL, CharType, is_isolate

__all__ = ["Run", "RunList", "encode_bidi_types", "shadow_run_list"]


@dataclass(eq=False)
class Run:
    """A stretch of ``length`` characters starting at ``pos``."""

    type: CharType
    pos: int = 0
    length: int = 0
    level: int = 0
    isolate_level: int = 0
    bracket_type: int = NO_BRACKET
    prev: Run | None = field(default=None, repr=False)
    next: Run | None = field(default=None, repr=False)
    prev_isolate: Run | None = field(default=None, repr=False)
    next_isolate: Run | None = field(default=None, repr=False)


class RunList:
    """A circular doubly linked list of runs around a sentinel node."""

    def __init__(self, runs: Sequence[Run] = ()) -> None:
        self._sentinel = Run(
            type=CharType.SENTINEL, pos=SENTINEL, length=SENTINEL, level=SENTINEL
        )
        self._sentinel.prev = self._sentinel.next = self._sentinel
        for run in runs:
            self.append(run)

    def __iter__(self) -> Iterator[Run]:
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def append(self, run: Run) -> None:
        """Link a run at the end of the list, unlinking it first if linked."""
        if run is self._sentinel:
            raise ValueError("cannot append the list's own sentinel")
        if run.prev is not None and run.next is not None:
            run.prev.next = run.next
            run.next.prev = run.prev
        tail = self._sentinel.prev
        run.prev = tail
        tail.next = run
        run.next = self._sentinel
        self._sentinel.prev = run

    def remove(self, run: Run) -> None:
        """Unlink a run from the list."""
        if run is self._sentinel:
            raise ValueError("cannot remove the sentinel")
        if run.prev is None or run.next is None:
            raise ValueError("run is not linked into a list")
        run.prev.next = run.next
        run.next.prev = run.prev
        run.prev = run.next = None

    def validate(self) -> None:
        """Check the links of the list, raising ValueError if they are broken."""
        sentinel = self._sentinel
        if sentinel.next is None or sentinel.next.prev is not sentinel:
            raise ValueError("sentinel is not linked to its successor")
        seen = set()
        node = sentinel.next
        while node is not sentinel:
            if id(node) in seen:
                raise ValueError("run list does not return to its sentinel")
            seen.add(id(node))
            if node.next is None or node.next.prev is not node:
                raise ValueError(f"broken link after run at position {node.pos}")
            node = node.next

    def _clear(self) -> None:
        self._sentinel.prev = self._sentinel.next = self._sentinel


def encode_bidi_types(
    bidi_types: Sequence[CharType],
    bracket_types: Sequence[int] | None = None,
) -> RunList:
    """Group consecutive characters of equal bidi type into runs.

    Brackets and isolate codes always form runs of their own.
    """
    if bracket_types is not None and len(bracket_types) != len(bidi_types):
        raise ValueError("bracket_types and bidi_types differ in length")

    runs = RunList()
    last: Run | None = None
    for i, char_type in enumerate(bidi_types):
        bracket = bracket_types[i] if bracket_types is not None else NO_BRACKET
        if (
            last is None
            or char_type != last.type
            or bracket != NO_BRACKET
            or last.bracket_type != NO_BRACKET
            or is_isolate(char_type)
        ):
            if last is not None:
                last.length = i - last.pos
            last = Run(type=char_type, pos=i, bracket_type=bracket)
            runs.append(last)
    if last is not None:
        last.length = len(bidi_types) - last.pos
    runs.validate()
    return runs


def shadow_run_list(base: RunList, over: RunList, preserve_length: bool) -> None:
    """Lay the runs of ``over`` on top of ``base``, consuming ``over``.

    Runs of ``base`` covered by a run of ``over`` are cut or dropped and the
    ``over`` run is linked in their place.  With ``preserve_length`` the
    covered run is first lengthened by the inserted run, as when reinserting
    characters that had been removed from ``base``.
    """
    base.validate()
    over.validate()

    base_end = base._sentinel
    over_end = over._sentinel
    p = base_end
    pos = 0

    q = over_end.next
    while q is not over_end:
        if not q.length or q.pos < pos:
            q = q.next
            continue
        pos = q.pos
        while p.next is not base_end and p.next.pos <= pos:
            p = p.next
        pos2 = pos + q.length
        r = p
        while r.next is not base_end and r.next.pos < pos2:
            r = r.next
        if preserve_length:
            r.length += q.length

        if p is r:
            if p.pos + p.length > pos2:
                r = Run(
                    type=p.type,
                    pos=pos2,
                    length=p.pos + p.length - pos2,
                    level=p.level,
                    isolate_level=p.isolate_level,
                )
                p.next.prev = r
                r.next = p.next
            else:
                r = r.next
            if p.pos + p.length >= pos:
                if p.pos < pos:
                    p.length = pos - p.pos
                else:
                    p = p.prev
        else:
            if p.pos + p.length >= pos:
                if p.pos < pos:
                    p.length = pos - p.pos
                else:
                    p = p.prev
            if r.pos + r.length > pos2:
                r.length = r.pos + r.length - pos2
                r.pos = pos2
            else:
                r = r.next

        inserted = q
        q = q.prev
        inserted.prev.next = inserted.next
        inserted.next.prev = inserted.prev
        p.next = inserted
        inserted.prev = p
        inserted.next = r
        r.prev = inserted
        q = q.next

    over._clear()
    base.validate()