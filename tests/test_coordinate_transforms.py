"""
Tests for the coordinate transforms between UV, vert, screen and pixel space.
"""
import pytest

from models.geometry import Rect, Vec2
from utils.coordinate_transforms import (
    uv_to_screen, screen_to_uv, vert_to_screen, screen_to_vert,
    normalize_rect, rotate_for_display, center_rect, fit_texture_rect,
    uv_to_pixels, pixels_to_uv,
)


def assert_rect_close(actual, expected, tol=1e-5):
    for a, e in zip(actual.as_tuple(), expected.as_tuple()):
        assert a == pytest.approx(e, abs=tol)


# ══════════════════════════════════════════════════════════════════════════
# UV <-> screen
# ══════════════════════════════════════════════════════════════════════════

class TestUvScreen:

    def test_uv_is_flipped_into_screen_space(self):
        target = Rect(10.0, 20.0, 200.0, 100.0)
        screen = uv_to_screen(Rect(0.25, 0.5, 0.5, 0.25), target)
        assert_rect_close(screen, Rect(60.0, 70.0, 100.0, -25.0))

    def test_full_unit_square_covers_target(self):
        target = Rect(0.0, 0.0, 64.0, 64.0)
        screen = uv_to_screen(Rect(0.0, 0.0, 1.0, 1.0), target)
        assert_rect_close(normalize_rect(screen), target)

    @pytest.mark.parametrize("uv", [
        Rect(0.375, 0.375, 0.25, 0.25),
        Rect(0.9, 0.1, -0.3, 0.6),      # mirrored
        Rect(0.0, 1.0, 1.0, -1.0),
    ])
    def test_round_trip(self, uv):
        target = Rect(13.0, -7.0, 333.0, 127.0)
        assert_rect_close(screen_to_uv(uv_to_screen(uv, target), target), uv)

    def test_inverted_rect_stays_inverted(self):
        target = Rect(0.0, 0.0, 100.0, 100.0)
        screen = uv_to_screen(Rect(0.5, 0.5, -0.25, 0.25), target)
        assert screen.width < 0.0
        assert screen.height < 0.0


# ══════════════════════════════════════════════════════════════════════════
# Vert <-> screen
# ══════════════════════════════════════════════════════════════════════════

class TestVertScreen:

    def test_preview_glyph_rect(self):
        screen = vert_to_screen(Rect(0.0, -20.0, 40.0, 20.0), Vec2(10.0, 10.0))
        assert screen.as_tuple() == (10.0, 30.0, 40.0, -20.0)

    def test_round_trip(self):
        origin = Vec2(123.5, -44.0)
        vert = Rect(-3.0, 17.25, 42.0, -8.0)
        assert_rect_close(screen_to_vert(vert_to_screen(vert, origin), origin), vert)

    def test_screen_delta_moves_vert_opposite_in_y(self):
        origin = Vec2(0.0, 0.0)
        screen = vert_to_screen(Rect(0.0, 0.0, 10.0, 10.0), origin)
        screen.y += 5.0
        assert screen_to_vert(screen, origin).y == -5.0


# ══════════════════════════════════════════════════════════════════════════
# Rect helpers
# ══════════════════════════════════════════════════════════════════════════

class TestRectHelpers:

    def test_normalize_negative_extents(self):
        assert normalize_rect(Rect(10.0, 10.0, -4.0, -6.0)).as_tuple() == (6.0, 4.0, 4.0, 6.0)

    def test_normalize_does_not_mutate(self):
        rect = Rect(10.0, 10.0, -4.0, 6.0)
        normalize_rect(rect)
        assert rect.as_tuple() == (10.0, 10.0, -4.0, 6.0)

    def test_normalize_positive_is_identity(self):
        assert normalize_rect(Rect(1.0, 2.0, 3.0, 4.0)).as_tuple() == (1.0, 2.0, 3.0, 4.0)

    def test_rotate_for_display(self):
        assert rotate_for_display(Rect(10.0, 30.0, 40.0, -20.0)).as_tuple() == (50.0, 10.0, -20.0, -40.0)

    def test_center_rect(self):
        assert center_rect(Rect(0.0, 0.0, 100.0, 50.0), 20.0, 10.0).as_tuple() == (40.0, 20.0, 20.0, 10.0)

    def test_fit_texture_rect_uses_smaller_bound(self):
        rect = fit_texture_rect(Rect(0.0, 0.0, 400.0, 200.0), 512, 512)
        assert rect.as_tuple() == (100.0, 0.0, 200.0, 200.0)

    def test_fit_texture_rect_keeps_aspect(self):
        rect = fit_texture_rect(Rect(0.0, 0.0, 300.0, 300.0), 256, 128)
        assert rect.width == pytest.approx(300.0)
        assert rect.height == pytest.approx(150.0)
        assert rect.y == pytest.approx(75.0)


# ══════════════════════════════════════════════════════════════════════════
# Pixels (inspector display unit)
# ══════════════════════════════════════════════════════════════════════════

class TestPixels:

    def test_uv_to_pixels(self):
        assert uv_to_pixels(Rect(0.25, 0.5, 0.5, 0.25), 256, 128).as_tuple() == (64.0, 64.0, 128.0, 32.0)

    def test_pixels_round_trip(self):
        uv = Rect(0.123, 0.456, -0.25, 0.3)
        assert_rect_close(pixels_to_uv(uv_to_pixels(uv, 512, 256), 512, 256), uv)


# ══════════════════════════════════════════════════════════════════════════
# Rect model
# ══════════════════════════════════════════════════════════════════════════

class TestRect:

    def test_edge_setters_keep_opposite_edge(self):
        rect = Rect(10.0, 10.0, 20.0, 20.0)
        rect.x_min = 40.0
        assert rect.x_max == 30.0
        assert rect.width == -10.0

    def test_contains_is_half_open(self):
        rect = Rect(0.0, 0.0, 10.0, 10.0)
        assert rect.contains(Vec2(0.0, 0.0))
        assert not rect.contains(Vec2(10.0, 5.0))

    def test_inverted_contains_only_with_allow_inverse(self):
        rect = Rect(10.0, 30.0, 40.0, -20.0)
        point = Vec2(20.0, 20.0)
        assert not rect.contains(point)
        assert rect.contains(point, allow_inverse=True)
