#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~
#  MIT License
#
#  Copyright (c) 2025 Nathan Juraj Michlo
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to deal
#  in the Software without restriction, including without limitation the rights
#  to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
#  copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
#  OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
#  SOFTWARE.
#  ~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~=~

__all__ = [
    "Buffer",
    "LIFOBuffer",
    "FIFOBuffer",
]

from abc import ABC, abstractmethod
from typing import Any, Hashable, Tuple


# ========================================================================= #
# Buffer - Interface                                                        #
# ========================================================================= #


class Buffer(ABC):
    """
    Overflow store used by a bounded `Robin`.

    When the robin is full, added values are pushed here instead, and when
    a value is removed from the robin a replacement is popped from here.
    The pop order is up to the implementation.

    Implementations must never raise for an empty buffer, `pop` returns
    `(None, False)` instead.
    """

    @abstractmethod
    def push(self, value: Hashable) -> None:
        """Push a value, overwriting the oldest value if the buffer is full."""

    @abstractmethod
    def pop(self) -> Tuple[Any, bool]:
        """Pop a value, the second item is False if the buffer is empty."""

    @abstractmethod
    def contains(self, value: Hashable) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def reset(self) -> None:
        ...

    def __contains__(self, value: Hashable) -> bool:
        return self.contains(value)

    @classmethod
    def __subclasshook__(cls, C):
        # structural check, any class providing the full interface counts as a Buffer
        if cls is Buffer:
            required = ("push", "pop", "contains", "__len__", "reset")
            if all(any(name in B.__dict__ for B in C.__mro__) for name in required):
                return True
        return NotImplemented


# ========================================================================= #
# Buffer - Fixed Capacity                                                   #
# ========================================================================= #


class _CircularBuffer(Buffer):
    """
    Fixed size circular list with overwrite on push, subclasses choose
    which end values are popped from.

    Occurrences of each value are counted so that `contains` is O(1).
    The buffer itself allows duplicates, but `Robin` only ever pushes
    values that are not already buffered.
    """

    def __init__(self, capacity: int):
        if not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got: {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got: {capacity}")
        self._list = [None] * capacity
        self._capacity = capacity
        self._i = 0  # next write position
        self._n = 0
        self._counts = {}

    def _inc_count(self, value):
        self._n += 1
        self._counts[value] = self._counts.get(value, 0) + 1

    def _dec_count(self, value):
        self._n -= 1
        self._counts[value] -= 1
        if self._counts[value] == 0:
            del self._counts[value]

    def push(self, value: Hashable) -> None:
        if self._n == self._capacity:
            self._dec_count(self._list[self._i])
        self._inc_count(value)
        self._list[self._i] = value
        self._i = (self._i + 1) % self._capacity

    def contains(self, value: Hashable) -> bool:
        return value in self._counts

    def __len__(self) -> int:
        return self._n

    def reset(self) -> None:
        # stale entries in the list are never read again
        self._i = 0
        self._n = 0
        self._counts = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __repr__(self):
        return f"{self.__class__.__name__}(capacity={self._capacity}, len={self._n})"


class LIFOBuffer(_CircularBuffer):
    """
    Stack-like buffer with a fixed capacity.

    The most recently pushed value is popped first. If the buffer
    is full, pushing a new value overwrites the oldest value.
    All operations are O(1).
    """

    def pop(self) -> Tuple[Any, bool]:
        if self._n == 0:
            return None, False
        self._i = (self._i - 1) % self._capacity
        value = self._list[self._i]
        self._dec_count(value)
        return value, True


class FIFOBuffer(_CircularBuffer):
    """
    Queue-like buffer with a fixed capacity.

    The oldest value still in the buffer is popped first. If the
    buffer is full, pushing a new value overwrites the oldest value.
    All operations are O(1).
    """

    def pop(self) -> Tuple[Any, bool]:
        if self._n == 0:
            return None, False
        value = self._list[(self._i - self._n) % self._capacity]
        self._dec_count(value)
        return value, True


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
