import logging
from math import perm
from typing import Callable, Generic, Iterable

from kperms.kptypes import KPerm, T

logger = logging.getLogger(__name__)


class _Level(Generic[T]):
    """
    One position of the permutation prefix. Each call to next() swaps the
    pivot index `level` with the next index in `steps`, cumulatively, and
    returns a copy of the full buffer.
    """

    __slots__ = ("level", "elements", "steps")

    def __init__(self, elements: list[T], level: int, first: int | None = None):
        if level >= len(elements):
            raise IndexError(f"level {level} out of range for {len(elements)} elements")
        self.level = level
        self.elements = elements
        self.steps = iter(range(level + 1 if first is None else first, len(elements)))

    def reseed(self, elements: list[T]) -> None:
        # the ancestor already emitted this buffer unswapped
        self.elements = elements
        self.steps = iter(range(self.level + 1, len(elements)))

    def advance(self) -> list[T] | None:
        idx = next(self.steps, None)
        if idx is None:
            return None
        buf = self.elements
        buf[self.level], buf[idx] = buf[idx], buf[self.level]
        return buf.copy()


class KPGenerator(Generic[T]):
    """
    Lazily yields every k-permutation of `elements` exactly once, as tuples
    of length k. Order follows the swap/backtrack scheme and is not
    lexicographic. Invalid k raises ValueError here; use kperms() to get None
    back instead.
    """

    def __init__(self, elements: Iterable[T], k: int):
        elements = list(elements)
        n = len(elements)
        if k <= 0 or n == 0 or k > n:
            raise ValueError(f"k must satisfy 1 <= k <= {n}, got {k}")
        self.k = k
        # the deepest level also yields its unswapped seed
        self._levels = [_Level(elements.copy(), i) for i in range(k - 1)]
        self._levels.append(_Level(elements.copy(), k - 1, first=k - 1))
        self._current = k - 1
        self._done = False

    def __iter__(self) -> "KPGenerator[T]":
        return self

    def __next__(self) -> KPerm:
        if self._done:
            raise StopIteration
        levels, k = self._levels, self.k
        buf = levels[self._current].advance()
        while buf is None:
            if self._current == 0:
                self._done = True
                logger.debug("exhausted k=%d generator", k)
                raise StopIteration
            self._current -= 1
            buf = levels[self._current].advance()
            if buf is not None:
                for level in levels[self._current + 1:]:
                    level.reseed(buf.copy())
                self._current = k - 1
        return tuple(buf[:k])


def n_kperms(n: int, k: int) -> int:
    """number of k-permutations of n distinct positions; 0 if k is out of range"""
    if k <= 0 or k > n:
        return 0
    return perm(n, k)


def _kpwrap(
    func: Callable[[list[T], int], object], elements: Iterable[T], k: int
):
    try:
        elements = list(elements)
    except TypeError:
        raise TypeError("Elements must be iterable")
    if isinstance(k, bool) or not isinstance(k, int):
        raise TypeError(f"k must be an int, not {type(k).__name__}")
    if k <= 0 or not elements or k > len(elements):
        logger.debug("rejecting k=%d for %d elements", k, len(elements))
        return None
    return func(elements, k)


def kperms(elements: Iterable[T], k: int) -> KPGenerator[T] | None:
    return _kpwrap(KPGenerator, elements, k)
