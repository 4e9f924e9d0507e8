"""
Snake body - ordered, head-first sequence of occupied cells.
"""
from collections import deque
from typing import Deque, Iterable, Iterator, Set, Tuple

from .errors import InvalidMoveError, PreconditionError
from .geometry import Position


class SnakeBody:
    """
    The cells occupied by the snake, head first.

    A deque keeps the order and a set mirrors it for O(1) membership checks.
    Segments never overlap; move() and grow() refuse a head that would land
    on a cell still occupied after the step.
    """

    def __init__(self):
        self._segments: Deque[Position] = deque()
        self._occupied: Set[Position] = set()

    @classmethod
    def from_segments(cls, segments: Iterable[Position]) -> "SnakeBody":
        """
        Build a body from explicit head-first segments.

        Raises:
            PreconditionError: If segments is empty or contains duplicates
        """
        body = cls()
        cells = list(segments)
        if not cells:
            raise PreconditionError("A snake needs at least one segment")
        if len(set(cells)) != len(cells):
            raise PreconditionError("Snake segments must not overlap")
        body._segments = deque(cells)
        body._occupied = set(cells)
        return body

    def initialize(self, head: Position, length: int) -> None:
        """
        Lay out `length` segments running left (negative x) from `head`.

        Args:
            head: Position of the head segment
            length: Number of segments, at least 1
        """
        if length < 1:
            raise PreconditionError(f"Snake length must be at least 1, got {length}")
        self._segments = deque(Position(head.x - i, head.y) for i in range(length))
        self._occupied = set(self._segments)

    def move(self, new_head: Position) -> None:
        """Advance one cell: new head in front, tail dropped."""
        tail = self._segments[-1]
        if new_head in self._occupied and new_head != tail:
            raise InvalidMoveError(f"Head {new_head} would overlap the body")
        self._segments.pop()
        self._occupied.discard(tail)
        self._segments.appendleft(new_head)
        self._occupied.add(new_head)

    def grow(self, new_head: Position) -> None:
        """Advance one cell keeping the tail, so the body gets one longer."""
        if new_head in self._occupied:
            raise InvalidMoveError(f"Head {new_head} would overlap the body")
        self._segments.appendleft(new_head)
        self._occupied.add(new_head)

    def contains(self, position: Position) -> bool:
        return position in self._occupied

    def head_at(self, position: Position) -> bool:
        return bool(self._segments) and self._segments[0] == position

    @property
    def head(self) -> Position:
        return self._segments[0]

    @property
    def tail(self) -> Position:
        return self._segments[-1]

    @property
    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._segments)

    def without_tail(self) -> Tuple[Position, ...]:
        return tuple(self._segments)[:-1]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Position]:
        return iter(tuple(self._segments))

    def __contains__(self, position: Position) -> bool:
        return self.contains(position)
