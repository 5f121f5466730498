"""Pixel to cell mapping used by the click handler."""

from Gobang_Game.gui import geometry


def test_canvas_size_default():
    assert geometry.canvas_size() == 15 * 36 + 60


def test_intersections_map_to_cells():
    assert geometry.pixel_to_cell(30, 30) == (0, 0)
    x, y = geometry.cell_to_pixel(7, 11)
    assert (x, y) == (11 * 36 + 30, 7 * 36 + 30)
    assert geometry.pixel_to_cell(x, y) == (7, 11)


def test_nearest_intersection_half_up():
    # Exactly half a cell past (0, 0) rounds up
    assert geometry.pixel_to_cell(30 + 18, 30 + 17) == (0, 1)
    assert geometry.pixel_to_cell(30 + 54, 30) == (0, 2)


def test_off_board_clicks_are_not_filtered():
    assert geometry.pixel_to_cell(0, 0) == (-1, -1)
    assert geometry.pixel_to_cell(600, 5) == (-1, 16)


def test_custom_layout():
    assert geometry.pixel_to_cell(50, 90, cell_size=20, margin=10) == (4, 2)
