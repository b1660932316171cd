"""Micro QR Code specification tables: capacity, length indicators, format information and frames."""

from __future__ import annotations

from typing import NamedTuple

from microqr.types import MQRSPEC_VERSION_MAX, ECLevel, EncodeMode

MQRSPEC_WIDTH_MAX = 17
"""Largest edge length of a Micro QR Code symbol."""

MODEID_NUM = 0
MODEID_AN = 1
MODEID_8 = 2
MODEID_KANJI = 3


class _Capacity(NamedTuple):
    width: int
    ec: tuple[int, int, int, int]


_CAPACITY: tuple[_Capacity, ...] = (
    _Capacity(0, (0, 0, 0, 0)),
    _Capacity(11, (2, 0, 0, 0)),
    _Capacity(13, (5, 6, 0, 0)),
    _Capacity(15, (6, 8, 0, 0)),
    _Capacity(17, (8, 10, 14, 0)),
)

_LENGTH_TABLE_BITS: tuple[tuple[int, int, int, int], ...] = (
    (3, 4, 5, 6),
    (0, 3, 4, 5),
    (0, 0, 4, 5),
    (0, 0, 3, 4),
)

_FORMAT_INFO: tuple[tuple[int, ...], ...] = (
    (0x4445, 0x55AE, 0x6793, 0x7678, 0x06DE, 0x1735, 0x2508, 0x34E3),
    (0x4172, 0x5099, 0x62A4, 0x734F, 0x03E9, 0x1202, 0x203F, 0x31D4),
    (0x4E2B, 0x5FC0, 0x6DFD, 0x7C16, 0x0CB0, 0x1D5B, 0x2F66, 0x3E8D),
    (0x4B1C, 0x5AF7, 0x68CA, 0x7921, 0x0987, 0x186C, 0x2A51, 0x3BBA),
)

_TYPE_TABLE: tuple[tuple[int, int, int], ...] = (
    (-1, -1, -1),
    (0, -1, -1),
    (1, 2, -1),
    (3, 4, -1),
    (5, 6, 7),
)

_FINDER: tuple[tuple[int, ...], ...] = (
    (0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1),
    (0xC1, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC1, 0xC1, 0xC1, 0xC0, 0xC1),
    (0xC1, 0xC0, 0xC0, 0xC0, 0xC0, 0xC0, 0xC1),
    (0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1, 0xC1),
)


def _capacity(version: int) -> _Capacity:
    if not 0 <= version <= MQRSPEC_VERSION_MAX:
        raise ValueError(f"Micro QR version must be 0..{MQRSPEC_VERSION_MAX}, got {version}")
    return _CAPACITY[version]


def _level_index(level: int) -> int:
    index = int(level)
    if not ECLevel.L <= index <= ECLevel.H:
        raise ValueError(f"invalid error correction level: {level!r}")
    return index


def _length_bits(mode: int, version: int) -> int:
    mode_index = int(mode)
    if not EncodeMode.NUM <= mode_index <= EncodeMode.KANJI:
        raise ValueError(f"mode has no length indicator in Micro QR: {mode!r}")
    if not 1 <= version <= MQRSPEC_VERSION_MAX:
        raise ValueError(f"Micro QR version must be 1..{MQRSPEC_VERSION_MAX}, got {version}")
    return _LENGTH_TABLE_BITS[mode_index][version - 1]


def data_length_bit(version: int, level: int) -> int:
    """Return the data capacity in bits, or 0 if the level is unavailable for the version."""
    cap = _capacity(version)
    ecc = cap.ec[_level_index(level)]
    if ecc == 0:
        return 0
    w = cap.width - 1
    return w * w - 64 - ecc * 8


def data_length(version: int, level: int) -> int:
    """Return the data capacity in bytes, counting a trailing half byte as one."""
    return (data_length_bit(version, level) + 4) // 8


def ecc_length(version: int, level: int) -> int:
    """Return the number of error correction bytes."""
    return _capacity(version).ec[_level_index(level)]


def width(version: int) -> int:
    """Return the edge length of a symbol of the given version."""
    return _capacity(version).width


def length_indicator(mode: int, version: int) -> int:
    """Return the size in bits of the length indicator for the mode and version."""
    return _length_bits(mode, version)


def maximum_words(mode: int, version: int) -> int:
    """Return the largest length the indicator can hold; in bytes for Kanji mode."""
    words = (1 << _length_bits(mode, version)) - 1
    if int(mode) == EncodeMode.KANJI:
        words *= 2
    return words


def format_info(mask: int, version: int, level: int) -> int:
    """Return the BCH-encoded format information, or 0 for an unsupported combination."""
    if not 0 <= mask <= 3:
        return 0
    if not 0 < version <= MQRSPEC_VERSION_MAX:
        return 0
    level_index = int(level)
    if not ECLevel.L <= level_index < ECLevel.H:
        return 0
    symbol_type = _TYPE_TABLE[version][level_index]
    if symbol_type < 0:
        return 0
    return _FORMAT_INFO[mask][symbol_type]


def new_frame(version: int) -> bytearray:
    """Return a fresh width*width frame with the function patterns placed."""
    if not 1 <= version <= MQRSPEC_VERSION_MAX:
        raise ValueError(f"Micro QR version must be 1..{MQRSPEC_VERSION_MAX}, got {version}")
    size = _CAPACITY[version].width
    frame = bytearray(size * size)

    for y, row in enumerate(_FINDER):
        frame[y * size:y * size + 7] = bytes(row)
    # Separator
    for y in range(7):
        frame[y * size + 7] = 0xC0
    frame[size * 7:size * 7 + 8] = b"\xc0" * 8
    # Format information area
    frame[size * 8 + 1:size * 8 + 9] = b"\x84" * 8
    for y in range(1, 8):
        frame[y * size + 8] = 0x84
    # Timing pattern
    for offset, x in enumerate(range(1, size - 7)):
        value = 0x90 | (x & 1)
        frame[8 + offset] = value
        frame[(8 + offset) * size] = value

    return frame