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
    "Robin",
]

import logging
from typing import Any, Hashable, Tuple

from robin.buffer import Buffer


logger = logging.getLogger(__name__)


# ========================================================================= #
# Ring Nodes                                                                #
# ========================================================================= #


class _Node(object):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value):
        self.value = value
        self.prev: "_Node | None" = None
        self.next: "_Node | None" = None


# ========================================================================= #
# Robin                                                                     #
# ========================================================================= #


class Robin(object):
    """
    Round-robin over a set of unique hashable values, supporting O(1)
    addition, removal and retrieval of the next value.

    Values are kept in a circular doubly linked list with a dict mapping
    each value to its node. `add` inserts values just before the current
    position so that the next call to `next` returns the first added value.

    A robin can grow indefinitely, or be bounded by a maximum size, in which
    case an optional `Buffer` can be attached. When a bounded robin is full,
    added values are pushed to the buffer instead, and removed values are
    replaced in-place by values popped from the buffer.

    None of the operations raise for duplicate or missing values, they are
    simply ignored. `next` returns `(None, False)` when the robin is empty.

    WARNING: this is not thread-safe, the caller must synchronise access.
    """

    def __init__(self, max_size: int = 0, buffer: Buffer | None = None):
        if buffer is not None and not isinstance(buffer, Buffer):
            raise TypeError(f"buffer must be an instance of Buffer, got: {type(buffer).__name__}")
        if max_size <= 0:
            if max_size < 0 or buffer is not None:
                logger.debug(f"non-positive max_size={max_size} given, robin is unbounded and the buffer is ignored")
            max_size, buffer = 0, None
        self._max_size = max_size
        self._buffer = buffer
        self._cursor: _Node | None = None
        self._nodes: dict[Any, _Node] = {}

    @classmethod
    def unbounded(cls) -> "Robin":
        return cls()

    @classmethod
    def bounded(cls, max_size: int, buffer: Buffer | None = None) -> "Robin":
        """
        Create a robin holding at most `max_size` values. If `max_size` is
        zero or negative an unbounded robin is returned and the buffer is
        ignored.
        """
        return cls(max_size=max_size, buffer=buffer)

    # --- config --- #

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def is_bounded(self) -> bool:
        return self._max_size > 0

    @property
    def buffer(self) -> Buffer | None:
        return self._buffer

    def _is_full(self) -> bool:
        return self._max_size > 0 and len(self._nodes) >= self._max_size

    # --- ring --- #

    def _attach(self, head: _Node | None, tail: _Node | None):
        # splice the chain head..tail in before the cursor, then move the cursor to the head
        if head is None:
            return
        if self._cursor is None:
            head.prev = tail
            tail.next = head
            self._cursor = head
            return
        nxt = self._cursor
        prv = nxt.prev
        head.prev = prv
        tail.next = nxt
        prv.next = head
        nxt.prev = tail
        self._cursor = head

    def _unlink(self, node: _Node):
        # last node in the ring
        if node.next is node:
            self._cursor = None
            return
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._cursor:
            self._cursor = node.next

    def _replace(self, node: _Node) -> bool:
        # reuse the node for a buffered value, keeping the ring and cursor as they are.
        # values already in the ring are discarded so the index stays in bijection with the ring
        if self._buffer is None:
            return False
        while True:
            value, ok = self._buffer.pop()
            if not ok:
                return False
            if value not in self._nodes:
                break
        node.value = value
        self._nodes[value] = node
        return True

    # --- mutation --- #

    def add(self, *values: Hashable) -> None:
        """
        Add values just before the current position, a subsequent call to
        `next` returns the first of these values. Values already in the
        robin are ignored. If the robin is full, values are pushed to the
        buffer if there is one (unless already buffered), otherwise the
        remaining values are dropped.
        """
        head, tail = None, None
        for i, value in enumerate(values):
            if value in self._nodes:
                continue
            if self._is_full():
                if self._buffer is None:
                    logger.debug(f"robin is full at max_size={self._max_size}, dropped {len(values) - i} value(s)")
                    break
                if not self._buffer.contains(value):
                    self._buffer.push(value)
                continue
            node = _Node(value)
            self._nodes[value] = node
            if head is None:
                head = tail = node
                continue
            node.prev = tail
            tail.next = node
            tail = node
        self._attach(head, tail)

    def remove(self, *values: Hashable) -> None:
        """
        Remove values from the robin. If there is a non-empty buffer each
        removed value is replaced by a popped value, in the same position.
        Values not in the robin, including buffered values, are ignored.
        """
        for value in values:
            node = self._nodes.pop(value, None)
            if node is None:
                continue
            if not self._replace(node):
                self._unlink(node)

    def reset(self) -> None:
        """Remove all values, including buffered values. The bound and buffer are kept."""
        self._cursor = None
        self._nodes = {}
        if self._buffer is not None:
            self._buffer.reset()

    # --- queries --- #

    def next(self) -> Tuple[Any, bool]:
        """
        Get the value at the current position and advance. If the
        robin is empty, `(None, False)` is returned.
        """
        node = self._cursor
        if node is None:
            return None, False
        self._cursor = node.next
        return node.value, True

    def contains(self, value: Hashable) -> bool:
        return value in self._nodes

    def buffer_contains(self, value: Hashable) -> bool:
        if self._buffer is None:
            return False
        return self._buffer.contains(value)

    def buffer_len(self) -> int:
        if self._buffer is None:
            return 0
        return len(self._buffer)

    def __contains__(self, value: Hashable) -> bool:
        return value in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self):
        bound = self._max_size if self._max_size > 0 else "unbounded"
        return f"{self.__class__.__name__}(len={len(self._nodes)}, max_size={bound}, buffer={self._buffer!r})"


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
