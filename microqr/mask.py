"""Mask patterns and penalty evaluation for full-size QR Code symbols."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

N1 = 3
N2 = 3
N3 = 40
N4 = 10
"""Demerit coefficients for the mask penalty rules."""

MASK_COUNT = 8
"""Number of mask patterns defined for QR Code."""

_PATTERNS: tuple[Callable[[int, int], int], ...] = (
    lambda x, y: (x + y) & 1,
    lambda x, y: y & 1,
    lambda x, y: x % 3,
    lambda x, y: (x + y) % 3,
    lambda x, y: ((y // 2) + (x // 3)) & 1,
    lambda x, y: ((x * y) & 1) + (x * y) % 3,
    lambda x, y: (((x * y) & 1) + (x * y) % 3) & 1,
    lambda x, y: (((x * y) % 3) + ((x + y) & 1)) & 1,
)


def _check_frame(width: int, frame: Sequence[int]) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if len(frame) != width * width:
        raise ValueError(f"frame must hold {width * width} modules, got {len(frame)}")


def make_masked_frame(width: int, frame: Sequence[int], mask: int) -> bytearray:
    """Return a copy of `frame` with the mask pattern applied to its data modules."""
    if not 0 <= mask < MASK_COUNT:
        raise ValueError(f"QR mask must be 0..{MASK_COUNT - 1}, got {mask}")
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


def calc_n1n3(run_length: Sequence[int]) -> int:
    """Penalty for long runs (rule 1) and finder-like 1:1:3:1:1 patterns (rule 3)."""
    length = len(run_length)
    demerit = 0
    for i, run in enumerate(run_length):
        if run >= 5:
            demerit += N1 + (run - 5)
        if i & 1 and 3 <= i < length - 2 and run % 3 == 0:
            fact = run // 3
            if all(run_length[j] == fact for j in (i - 2, i - 1, i + 1, i + 2)):
                if i == 3 or run_length[i - 3] >= 4 * fact:
                    demerit += N3
                elif i + 4 >= length or run_length[i + 3] >= 4 * fact:
                    demerit += N3
    return demerit


def calc_n2(width: int, frame: Sequence[int]) -> int:
    """Penalty for every 2x2 block of modules of one colour (rule 2)."""
    _check_frame(width, frame)
    demerit = 0
    for y in range(1, width):
        for x in range(1, width):
            p = y * width + x
            block = {frame[p] & 1, frame[p - 1] & 1, frame[p - width] & 1, frame[p - width - 1] & 1}
            if len(block) == 1:
                demerit += N2
    return demerit


def _run_lengths(cells: Iterable[int]) -> list[int]:
    runs: list[int] = []
    prev: int | None = None
    for cell in cells:
        bit = cell & 1
        if prev is None:
            if bit:
                runs.append(-1)
            runs.append(1)
        elif bit != prev:
            runs.append(1)
        else:
            runs[-1] += 1
        prev = bit
    return runs


def calc_run_length_h(width: int, frame: Sequence[int]) -> list[int]:
    """Run lengths of the first `width` modules; a leading -1 marks a row starting dark."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return _run_lengths(frame[i] for i in range(width))


def calc_run_length_v(width: int, frame: Sequence[int]) -> list[int]:
    """Run lengths down a column: modules 0, width, 2*width, ... of `frame`."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return _run_lengths(frame[i * width] for i in range(width))


def evaluate_symbol(width: int, frame: Sequence[int]) -> int:
    """Total penalty of a masked symbol from rules 1 to 3; lower is better."""
    _check_frame(width, frame)
    view = memoryview(bytes(frame))
    demerit = calc_n2(width, view)
    for y in range(width):
        demerit += calc_n1n3(calc_run_length_h(width, view[y * width:]))
    for x in range(width):
        demerit += calc_n1n3(calc_run_length_v(width, view[x:]))
    return demerit