import pytest

from geometry.primitives import between, between_values, det, distance, distance2, turn_sign


class TestDeterminant:
    def test_twice_the_triangle_area(self):
        assert det(0.0, 0.0, 2.0, 0.0, 0.0, 2.0) == 4.0
        assert det(0.0, 0.0, 0.0, 2.0, 2.0, 0.0) == -4.0

    def test_collinear_points(self):
        assert det(0.0, 0.0, 1.0, 1.0, 3.0, 3.0) == 0.0


class TestTurnSign:
    @pytest.mark.parametrize("points,expected", [
        ((0.0, 0.0, 1.0, 0.0, 1.0, 1.0), 1),
        ((0.0, 0.0, 1.0, 0.0, 1.0, -1.0), -1),
        ((0.0, 0.0, 1.0, 0.0, 2.0, 0.0), 0),
        ((0.0, 0.0, 1.0, 0.0, 0.0, 0.0), 0),
    ])
    def test_left_right_and_straight(self, points, expected):
        assert turn_sign(*points) == expected

    def test_swapping_two_points_flips_the_turn(self):
        assert turn_sign(0.0, 0.0, 3.0, 1.0, 1.0, 2.0) == -turn_sign(0.0, 0.0, 1.0, 2.0, 3.0, 1.0)


class TestDistance:
    def test_distance(self):
        assert distance(0.0, 0.0, 3.0, 4.0) == 5.0
        assert distance2(1.0, 1.0, 4.0, 5.0) == 25.0


class TestBetween:
    def test_values_in_any_order(self):
        assert between_values(1.0, 2.0, 0.0)
        assert between_values(2.0, 2.0, 0.0)
        assert not between_values(2.0, 2.0, 0.0, False)

    def test_point_on_segment(self):
        assert between(0.5, 0.5, 0.0, 0.0, 1.0, 1.0)
        assert between(1.0, 1.0, 0.0, 0.0, 1.0, 1.0)
        assert not between(1.0, 1.0, 0.0, 0.0, 1.0, 1.0, False)
        assert not between(0.5, 0.6, 0.0, 0.0, 1.0, 1.0)
        assert not between(2.0, 2.0, 0.0, 0.0, 1.0, 1.0)
