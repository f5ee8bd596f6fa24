import math

import pytest

from stellar import SystemConfig, Vector3
from stellar.camera import Camera2D, marker_radius
from stellar.constants import MAX_MASS, MAX_STAR_SIZE
from stellar.utils import parse_seed, status_line


def test_top_down_projection_drops_height() -> None:
    camera = Camera2D(center=(0.0, 0.0), units_per_pixel=2.0)
    camera.set_viewport_size(200, 100)
    assert camera.world_to_screen((0.0, 999.0, 0.0)) == (100, 50)
    assert camera.world_to_screen((20.0, 0.0, -10.0)) == (110, 45)
    assert camera.screen_to_world((110, 45)) == (20.0, -10.0)


def test_pan_moves_content_with_pointer() -> None:
    camera = Camera2D(units_per_pixel=2.0)
    camera.set_viewport_size(200, 100)
    point = Vector3(30.0, -4.0, 10.0)
    x, y = camera.world_to_screen(point)
    camera.pan_pixels(10, -5)
    assert camera.world_to_screen(point) == (x + 10, y - 5)
    assert camera.center == [-20.0, 10.0]


def test_zoom_keeps_pivot_fixed() -> None:
    camera = Camera2D(center=(5.0, 5.0), units_per_pixel=1.0)
    camera.set_viewport_size(100, 100)
    before = camera.screen_to_world((80, 20))
    camera.zoom(2.0, (80, 20))
    after = camera.screen_to_world((80, 20))
    assert camera.upp == pytest.approx(0.5)
    assert after == pytest.approx(before)


def test_fit_points_covers_all_points() -> None:
    camera = Camera2D()
    camera.set_viewport_size(400, 400)
    points = [(-1000.0, 0.0, -200.0), (1000.0, 50.0, 200.0)]
    camera.fit_points(points)
    for p in points:
        x, y = camera.world_to_screen(p)
        assert 0 <= x <= 400 and 0 <= y <= 400


def test_marker_radius() -> None:
    assert marker_radius(MAX_MASS) == pytest.approx(MAX_STAR_SIZE)
    assert marker_radius(MAX_MASS / 8) == pytest.approx(MAX_STAR_SIZE / 2)
    assert marker_radius(0.001) == 1.0


def test_config_validate_and_copy() -> None:
    config = SystemConfig()
    assert config.validate() is config
    tweaked = config.copy(seed=3, g=2.0)
    assert tweaked.seed == 3 and tweaked.g == 2.0
    assert config.seed is None

    for bad in (
        SystemConfig(dt=0.0),
        SystemConfig(separation_floor=-1.0),
        SystemConfig(orbit_factor_range=(1.2, 0.8)),
        SystemConfig(velocity_jitter_fraction=-0.1),
        SystemConfig(planet_mass=math.nan),
    ):
        with pytest.raises(ValueError):
            bad.validate()


def test_parse_seed() -> None:
    assert parse_seed("") is None
    assert parse_seed("  ") is None
    assert parse_seed("42") == 42
    assert parse_seed(" 7 ") == 7
    assert parse_seed("abc") is None


def test_status_line_shows_frame_rate() -> None:
    assert status_line(59.6, 10, 12.34, True) == "FPS: 60  Speed: 10 steps/frame  t=12.3  [Playing]"
    assert status_line(0.0, 0, 0.0, False).endswith("[Paused]")
