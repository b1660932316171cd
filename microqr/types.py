"""Encoding modes, error correction levels and library version information."""

from __future__ import annotations

from enum import IntEnum

MAJOR_VERSION = 4
MINOR_VERSION = 0
MICRO_VERSION = 2
VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{MICRO_VERSION}"

QRSPEC_VERSION_MAX = 40
"""Largest version of a full-size QR Code symbol."""

MQRSPEC_VERSION_MAX = 4
"""Largest version of a Micro QR Code symbol."""


class EncodeMode(IntEnum):
    """Encoding mode of a chunk of input data."""

    NUL = -1
    NUM = 0
    AN = 1
    BYTE = 2
    KANJI = 3
    STRUCTURE = 4
    ECI = 5
    FNC1_FIRST = 6
    FNC1_SECOND = 7


class ECLevel(IntEnum):
    """Error correction level, from lowest (L) to highest (H)."""

    L = 0
    M = 1
    Q = 2
    H = 3


def api_version() -> tuple[int, int, int]:
    """Return the (major, minor, micro) version numbers."""
    return (MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION)


def api_version_string() -> str:
    """Return the version as a dotted string."""
    return VERSION