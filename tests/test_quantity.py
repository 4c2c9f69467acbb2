"""Tests for the carton/piece to square-feet conversion."""

import pytest

from app.domain.quantity import calculate_feet, per_carton_feet, per_piece_feet


def test_one_foot_square_tile_is_one_foot_per_piece():
    assert per_piece_feet(12, 12) == 1
    assert per_carton_feet(12, 12, 10) == 10


def test_cartons_of_foot_tiles():
    """(12*12/144) * 10 pcs per carton * 2 cartons."""
    assert calculate_feet(12, 12, 10, caton=2, pcs=0) == pytest.approx(20)


def test_rectangular_tiles_with_loose_pieces():
    # 24x12 in = 2 ft per piece, 6 per carton -> 3 cartons + 4 pcs = 36 + 8
    assert calculate_feet(24, 12, 6, caton=3, pcs=4) == pytest.approx(44)


@pytest.mark.parametrize(
    "height, width, ratio, caton, pcs",
    [
        (12, 12, 10, 3, 7),
        (16, 16, 4, 11, 2),
        (24, 48, 2, 5, 1),
        (8.5, 11.25, 15, 0.5, 3),
    ],
)
def test_cartons_and_pieces_add_independently(height, width, ratio, caton, pcs):
    combined = calculate_feet(height, width, ratio, caton, pcs)
    split = calculate_feet(height, width, ratio, caton, 0) + calculate_feet(height, width, ratio, 0, pcs)
    assert combined == pytest.approx(split)


def test_linear_in_cartons():
    one = calculate_feet(16, 16, 4, caton=1)
    assert calculate_feet(16, 16, 4, caton=7) == pytest.approx(7 * one)


def test_zero_quantity_is_zero_feet():
    assert calculate_feet(12, 24, 8) == 0


@pytest.mark.parametrize(
    "height, width, ratio",
    [(0, 12, 10), (12, -1, 10), (12, 12, 0)],
)
def test_rejects_non_positive_dimensions(height, width, ratio):
    with pytest.raises(ValueError):
        calculate_feet(height, width, ratio, caton=1)


def test_rejects_negative_counts():
    with pytest.raises(ValueError):
        calculate_feet(12, 12, 10, caton=-1)
    with pytest.raises(ValueError):
        calculate_feet(12, 12, 10, pcs=-2)
