"""Assemble Micro QR Code symbols from data and error correction codewords."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from microqr import mmask, mqrspec
from microqr.framefiller import FrameFiller
from microqr.types import MQRSPEC_VERSION_MAX, ECLevel

NO_MASK = -2
"""Mask value that leaves the placed modules unmasked."""

AUTO_MASK = -1
"""Mask value that selects the best mask pattern."""


@dataclass(frozen=True)
class QRCode:
    """An encoded symbol: ``width * width`` modules, row by row.

    The lowest bit of each module is 1 for dark; the other bits describe
    the module's role (data, ECC, format, timing, finder, function pattern).
    """

    version: int
    width: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if len(self.data) != self.width * self.width:
            raise ValueError(f"symbol must hold {self.width * self.width} modules, got {len(self.data)}")

    def is_dark(self, x: int, y: int) -> bool:
        """Return True if the module at column x, row y is dark."""
        if not (0 <= x < self.width and 0 <= y < self.width):
            raise IndexError(f"module ({x}, {y}) is outside a {self.width}x{self.width} symbol")
        return bool(self.data[y * self.width + x] & 1)

    def rows(self) -> list[list[bool]]:
        """Return the symbol as rows of dark (True) and light (False) modules."""
        return [
            [bool(self.data[y * self.width + x] & 1) for x in range(self.width)]
            for y in range(self.width)
        ]


class MicroRawCode:
    """The data and ECC codewords of a Micro QR symbol, in placement order.

    Micro QR symbols have a single block, so the codewords are the data
    codewords followed by the ECC codewords. When the data capacity is not a
    whole number of bytes, only the high ``8 - oddbits`` bits of the last data
    codeword are placed.
    """

    def __init__(self, version: int, level: int, data: bytes, ecc: bytes) -> None:
        self.version = version
        self.level = ECLevel(level)
        self.data_length = mqrspec.data_length(version, self.level)
        self.ecc_length = mqrspec.ecc_length(version, self.level)
        if self.ecc_length == 0:
            raise ValueError(f"level {self.level.name} is not available for Micro QR version {version}")
        self.oddbits = self.data_length * 8 - mqrspec.data_length_bit(version, self.level)
        self.datacode = bytes(data)
        self.ecccode = bytes(ecc)
        if len(self.datacode) != self.data_length:
            raise ValueError(f"expected {self.data_length} data codewords, got {len(self.datacode)}")
        if len(self.ecccode) != self.ecc_length:
            raise ValueError(f"expected {self.ecc_length} ECC codewords, got {len(self.ecccode)}")

    def __iter__(self) -> Iterator[int]:
        yield from self.datacode
        yield from self.ecccode

    def modules(self) -> Iterator[int]:
        """Yield the module value of every bit to place, in order."""
        for i, code in enumerate(self.datacode):
            last = i == self.data_length - 1
            length = self.oddbits if last and self.oddbits else 8
            for j in range(length):
                yield (code >> (7 - j)) & 1
        for code in self.ecccode:
            for j in range(8):
                yield 0x02 | ((code >> (7 - j)) & 1)


def interleave_codes(data_blocks: Sequence[bytes], ecc_blocks: Sequence[bytes]) -> bytes:
    """Interleave Reed-Solomon blocks column by column, data first, then ECC.

    Blocks shorter than the longest one are skipped once they run out, so the
    extra codeword of longer data blocks is taken after all shared columns.
    """
    out = bytearray()
    for blocks in (data_blocks, ecc_blocks):
        blocks = [bytes(block) for block in blocks]
        depth = max((len(block) for block in blocks), default=0)
        for col in range(depth):
            out.extend(block[col] for block in blocks if col < len(block))
    return bytes(out)


def encode_micro_from_codes(version: int, level: int, data: bytes, ecc: bytes, mask: int = AUTO_MASK) -> QRCode:
    """Place data and ECC codewords in a Micro QR frame and apply a mask.

    A negative ``mask`` selects the best pattern automatically; ``NO_MASK``
    (-2) leaves the frame unmasked; 0..3 applies that pattern.
    """
    if not 1 <= version <= MQRSPEC_VERSION_MAX:
        raise ValueError(f"Micro QR version must be 1..{MQRSPEC_VERSION_MAX}, got {version}")
    if not ECLevel.L <= int(level) <= ECLevel.Q:
        raise ValueError(f"Micro QR supports levels L, M and Q, got {level!r}")

    raw = MicroRawCode(version, level, data, ecc)
    size = mqrspec.width(version)
    frame = mqrspec.new_frame(version)
    filler = FrameFiller(size, frame, mqr=True)

    for value in raw.modules():
        index = next(filler, None)
        if index is None:
            raise ValueError("codewords do not fit in the symbol frame")
        frame[index] = value

    if mask == NO_MASK:
        masked = bytearray(frame)
    elif mask < 0:
        masked = mmask.best_mask(version, frame, raw.level)
    else:
        masked = mmask.make_mask(version, frame, mask, raw.level)

    return QRCode(version, size, bytes(masked))