from productframe.canvas.position import calculate_position
from productframe.canvas.types import I64_MAX, I64_MIN, CenterOffset, PercentOffset, PixelOffset, Position


def test_pixel_offset_places_element_center_on_point():
    pos = calculate_position(PixelOffset(200, 100), (100, 50), (800, 600))
    assert pos == Position(150, 75)


def test_pixel_offset_halves_odd_sizes_by_truncation():
    pos = calculate_position(PixelOffset(10, 10), (101, 3), (800, 600))
    assert pos == Position(10 - 50, 10 - 1)


def test_pixel_offset_can_go_negative():
    assert calculate_position(PixelOffset(0, 0), (100, 100), (50, 50)) == Position(-50, -50)


def test_percent_offset_is_canvas_relative():
    pos = calculate_position(PercentOffset(50, 50), (100, 100), (800, 600))
    assert pos == Position(350, 250)


def test_percent_offset_truncates_toward_zero():
    # -15.5 truncates to -15, not floor -16
    assert calculate_position(PercentOffset(0, 0), (31, 31), (100, 100)) == Position(-15, -15)
    # 12.5 - 2.5 = 10.0 ; 33.3 - 0 = 33.3 -> 33
    assert calculate_position(PercentOffset(12.5, 33.3), (5, 0), (100, 100)) == Position(10, 33)


def test_percent_offset_is_not_clamped():
    pos = calculate_position(PercentOffset(150, -10), (0, 0), (200, 100))
    assert pos == Position(300, -10)


def test_center_offset_uses_floor_division():
    assert calculate_position(CenterOffset(), (100, 50), (800, 600)) == Position(350, 275)
    assert calculate_position(CenterOffset(), (50, 50), (101, 100)) == Position(25, 25)


def test_center_offset_never_goes_negative():
    pos = calculate_position(CenterOffset(), (300, 50), (100, 100))
    assert pos == Position(0, 25)
    assert calculate_position(CenterOffset(), (300, 300), (100, 100)) == Position(0, 0)


def test_percent_offset_saturates_instead_of_overflowing():
    assert calculate_position(PercentOffset(1e308, -1e308), (10, 10), (800, 600)) == Position(I64_MAX, I64_MIN)
    assert calculate_position(PercentOffset(float("inf"), 50), (0, 0), (800, 600)) == Position(I64_MAX, 300)
    assert calculate_position(PercentOffset(float("inf"), 0), (0, 0), (0, 0)) == Position(0, 0)
