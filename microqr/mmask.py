"""Mask patterns, format information placement and mask selection for Micro QR Code."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from microqr import mqrspec

MASK_COUNT = 4
"""Number of mask patterns defined for Micro QR Code."""

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: y & 1,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x + y) & 1) + ((x * y) % 3)) & 1,
)


def _check_mask(mask: int) -> None:
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"Micro QR mask must be 0..{MASK_COUNT - 1}, got {mask}")


def _check_frame(width: int, frame: Sequence[int]) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if len(frame) != width * width:
        raise ValueError(f"frame must hold {width * width} modules, got {len(frame)}")


def write_format_information(version: int, width: int, frame: bytearray, mask: int, level: int) -> None:
    """Write the format information for the mask and level into `frame` in place."""
    _check_frame(width, frame)
    fmt = mqrspec.format_info(mask, version, level)
    for i in range(8):
        frame[width * (i + 1) + 8] = 0x84 | (fmt & 1)
        fmt >>= 1
    for i in range(7):
        frame[width * 8 + 7 - i] = 0x84 | (fmt & 1)
        fmt >>= 1


def make_masked_frame(width: int, frame: Sequence[int], mask: int) -> bytearray:
    """Return a copy of `frame` with the mask pattern applied to its data modules."""
    _check_mask(mask)
    _check_frame(width, frame)
    pattern = _PATTERNS[mask]
    masked = bytearray(width * width)
    for y in range(width):
        for x in range(width):
            index = y * width + x
            value = frame[index]
            if not value & 0x80 and pattern(x, y) == 0:
                value ^= 1
            masked[index] = value
    return masked


def make_mask(version: int, frame: Sequence[int], mask: int, level: int) -> bytearray:
    """Apply the given mask to a frame of the version and write its format information."""
    _check_mask(mask)
    size = mqrspec.width(version)
    masked = make_masked_frame(size, frame, mask)
    write_format_information(version, size, masked, mask, level)
    return masked


def evaluate_symbol(width: int, frame: Sequence[int]) -> int:
    """Score a masked symbol by the dark modules on its lower and right edges; higher is better."""
    _check_frame(width, frame)
    bottom = width * (width - 1)
    sum1 = sum(frame[bottom + x] & 1 for x in range(1, width))
    sum2 = sum(frame[y * width + width - 1] & 1 for y in range(1, width))
    low, high = sorted((sum1, sum2))
    return low * 16 + high


def best_mask(version: int, frame: Sequence[int], level: int) -> bytearray:
    """Return the masked frame whose mask gives the highest score.

    Raises ValueError if no mask yields a positive score.
    """
    size = mqrspec.width(version)
    best: bytearray | None = None
    max_score = 0
    for mask in range(MASK_COUNT):
        candidate = make_mask(version, frame, mask, level)
        score = evaluate_symbol(size, candidate)
        if score > max_score:
            max_score = score
            best = candidate
    if best is None:
        raise ValueError("no mask pattern gives a usable symbol")
    return best