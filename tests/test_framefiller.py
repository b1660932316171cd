import pytest

from microqr import mqrspec
from microqr.framefiller import FrameFiller, fill_test_mqr


def test_first_index_is_lower_right_corner():
    size = mqrspec.width(1)
    filler = FrameFiller(size, mqrspec.new_frame(1), mqr=True)
    assert next(filler) == size * size - 1
    assert next(filler) == size * size - 2


def test_blank_even_frame_visits_every_module_once():
    indices = list(FrameFiller(4, bytearray(16), mqr=True))
    assert len(indices) == 16
    assert set(indices) == set(range(16))


def test_full_size_mode_skips_timing_column():
    size = 21
    indices = list(FrameFiller(size, bytearray(size * size), mqr=False))
    assert len(indices) == len(set(indices))
    assert all(index % size != 6 for index in indices)


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_visits_only_free_modules_of_micro_frame(version):
    size = mqrspec.width(version)
    frame = mqrspec.new_frame(version)
    indices = list(FrameFiller(size, frame, mqr=True))
    free = {i for i, value in enumerate(frame) if not value & 0x80}
    assert len(indices) == len(set(indices))
    assert set(indices) == free


def test_exhausted_iterator_stays_exhausted():
    filler = FrameFiller(4, bytearray(16), mqr=True)
    visited = list(filler)
    assert len(visited) == 16
    with pytest.raises(StopIteration):
        next(filler)


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_fill_test_mqr_fills_every_data_module(version):
    frame = fill_test_mqr(version)
    size = mqrspec.width(version)
    assert len(frame) == size * size
    assert all(value & 0x80 for value in frame)


@pytest.mark.parametrize("version", [1, 2, 3, 4])
def test_fill_test_mqr_keeps_function_patterns(version):
    original = mqrspec.new_frame(version)
    filled = fill_test_mqr(version)
    for before, after in zip(original, filled):
        if before & 0x80:
            assert after == before


def test_fill_test_mqr_order_values():
    frame = fill_test_mqr(1)
    size = mqrspec.width(1)
    assert frame[size * size - 1] == 0x80
    assert frame[size * size - 2] == 0x81


def test_fill_test_mqr_rejects_bad_version():
    with pytest.raises(ValueError):
        fill_test_mqr(5)
    with pytest.raises(ValueError):
        fill_test_mqr(0)


def test_rejects_frame_of_wrong_size():
    with pytest.raises(ValueError):
        FrameFiller(4, bytearray(15), mqr=True)


def test_rejects_non_positive_width():
    with pytest.raises(ValueError):
        FrameFiller(0, bytearray(), mqr=True)