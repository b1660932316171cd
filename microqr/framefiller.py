"""Placement order of data modules in a symbol frame."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

from microqr import mqrspec
from microqr.types import ECLevel


class FrameFiller:
    """Iterate over the indices of free modules in the order data bits are placed.

    Modules are visited in two-column strips from the lower-right corner,
    zig-zagging up and down. Modules whose 0x80 bit is set (function patterns)
    are skipped. Full-size symbols also skip the vertical timing column (x == 6);
    Micro QR symbols (``mqr`` true) do not.
    """

    def __init__(self, width: int, frame: Sequence[int], mqr: bool = False) -> None:
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        if len(frame) != width * width:
            raise ValueError(f"frame must hold {width * width} modules, got {len(frame)}")
        self.width = width
        self.frame = frame
        self.mqr = bool(mqr)
        self._x = width - 1
        self._y = width - 1
        self._dir = -1
        self._bit = -1
        self._done = False

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._done:
            raise StopIteration
        w = self.width
        if self._bit == -1:
            self._bit = 0
            return self._y * w + self._x

        while True:
            x, y = self._x, self._y
            if self._bit == 0:
                x -= 1
                self._bit += 1
            else:
                x += 1
                y += self._dir
                self._bit -= 1

            if self._dir < 0:
                if y < 0:
                    y = 0
                    x -= 2
                    self._dir = 1
                    if not self.mqr and x == 6:
                        x -= 1
                        y = 9
            elif y == w:
                y = w - 1
                x -= 2
                self._dir = -1
                if not self.mqr and x == 6:
                    x -= 1
                    y -= 8

            if x < 0 or y < 0:
                self._done = True
                raise StopIteration

            self._x, self._y = x, y
            index = y * w + x
            if not self.frame[index] & 0x80:
                return index


def fill_test_mqr(version: int) -> bytearray:
    """Return a Micro QR frame whose data modules hold their placement order.

    Each of the data and ECC bit positions for level L receives
    ``(i & 0x7f) | 0x80``, where ``i`` is its position in the sequence.
    If the frame runs out of free modules, the partly filled frame is returned.
    """
    size = mqrspec.width(version)
    frame: MutableSequence[int] = mqrspec.new_frame(version)
    length = mqrspec.data_length_bit(version, ECLevel.L) + mqrspec.ecc_length(version, ECLevel.L) * 8
    filler = FrameFiller(size, frame, mqr=True)
    for i, index in zip(range(length), filler):
        frame[index] = (i & 0x7F) | 0x80
    return frame