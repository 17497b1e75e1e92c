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

import pytest

from robin import FIFOBuffer
from robin import LIFOBuffer


# ========================================================================= #
# helper                                                                    #
# ========================================================================= #


def _pop(b):
    v, ok = b.pop()
    return v if ok else ok


def _run(buffer_cls, capacity, operations):
    b = buffer_cls(capacity)
    return [op(b) for op in operations]


# ========================================================================= #
# LIFO                                                                      #
# ========================================================================= #


@pytest.mark.parametrize(
    "operations, want",
    [
        # basic push and pop
        (
            [
                lambda b: (b.push(1), b.push(2), _pop(b))[-1],
                lambda b: _pop(b),
                lambda b: _pop(b),
            ],
            [2, 1, False],
        ),
        # len saturates at capacity
        (
            [
                lambda b: len(b),
                lambda b: (b.push(1), len(b))[-1],
                lambda b: (b.push(2), len(b))[-1],
                lambda b: (b.push(3), len(b))[-1],
            ],
            [0, 1, 2, 2],
        ),
        # contains tracks multiplicity
        (
            [
                lambda b: (b.push(1), b.contains(1))[-1],
                lambda b: b.contains(2),
                lambda b: (b.push(1), b.pop(), b.contains(1))[-1],
                lambda b: (b.pop(), b.contains(1))[-1],
            ],
            [True, False, True, False],
        ),
        # pushing to a full buffer overwrites the oldest value
        (
            [
                lambda b: (b.push(1), b.push(2), b.push(3), b.contains(1))[-1],
                lambda b: _pop(b),
                lambda b: _pop(b),
                lambda b: _pop(b),
            ],
            [False, 3, 2, False],
        ),
        # reset
        (
            [
                lambda b: (b.push(1), b.reset(), len(b))[-1],
                lambda b: b.contains(1),
                lambda b: _pop(b),
                lambda b: (b.push(4), _pop(b))[-1],
            ],
            [0, False, False, 4],
        ),
    ],
)
def test_lifo_buffer(operations, want):
    assert _run(LIFOBuffer, 2, operations) == want


def test_lifo_buffer_wraparound():
    b = LIFOBuffer(3)
    for i in range(1, 6):
        b.push(i)
    assert len(b) == 3
    assert not b.contains(1)
    assert not b.contains(2)
    assert [_pop(b) for _ in range(4)] == [5, 4, 3, False]
    assert len(b) == 0


def test_lifo_buffer_interleaved():
    b = LIFOBuffer(3)
    b.push("a")
    b.push("b")
    assert _pop(b) == "b"
    b.push("c")
    b.push("d")
    b.push("e")  # evicts "a"
    assert "a" not in b
    assert [_pop(b) for _ in range(4)] == ["e", "d", "c", False]


# ========================================================================= #
# FIFO                                                                      #
# ========================================================================= #


def test_fifo_buffer_order():
    b = FIFOBuffer(2)
    b.push(1)
    b.push(2)
    assert [_pop(b) for _ in range(3)] == [1, 2, False]


def test_fifo_buffer_overwrite():
    b = FIFOBuffer(2)
    b.push(1)
    b.push(2)
    b.push(3)
    assert not b.contains(1)
    assert len(b) == 2
    assert [_pop(b) for _ in range(3)] == [2, 3, False]


def test_fifo_buffer_interleaved():
    b = FIFOBuffer(3)
    b.push(1)
    b.push(2)
    assert _pop(b) == 1
    b.push(3)
    b.push(4)
    b.push(5)  # evicts 2
    assert 2 not in b
    assert [_pop(b) for _ in range(4)] == [3, 4, 5, False]


# ========================================================================= #
# shared                                                                    #
# ========================================================================= #


@pytest.mark.parametrize("buffer_cls", [LIFOBuffer, FIFOBuffer])
def test_buffer_duplicates(buffer_cls):
    b = buffer_cls(3)
    b.push(1)
    b.push(1)
    assert len(b) == 2
    assert _pop(b) == 1
    assert 1 in b
    assert _pop(b) == 1
    assert 1 not in b


@pytest.mark.parametrize("buffer_cls", [LIFOBuffer, FIFOBuffer])
def test_buffer_capacity(buffer_cls):
    assert buffer_cls(5).capacity == 5
    with pytest.raises(ValueError):
        buffer_cls(0)
    with pytest.raises(ValueError):
        buffer_cls(-1)
    with pytest.raises(TypeError):
        buffer_cls(1.5)


def test_buffer_repr():
    b = LIFOBuffer(4)
    b.push("x")
    assert repr(b) == "LIFOBuffer(capacity=4, len=1)"


# ========================================================================= #
# END                                                                       #
# ========================================================================= #
