"""Tests for the banner's per-frame update and variants."""

import random

from banner.shutter import ShutterState
from banner.state import BANNER_VARIANTS, BannerConfig, BannerState


def test_variants_are_one_engine_with_different_sizes():
    assert (BANNER_VARIANTS["classic"].width, BANNER_VARIANTS["classic"].height) == (1200, 300)
    assert (BANNER_VARIANTS["wide"].width, BANNER_VARIANTS["wide"].height) == (1600, 150)
    assert BANNER_VARIANTS["shutter"].shutter
    assert not BANNER_VARIANTS["classic"].shutter


def test_population(banner):
    assert len(banner.stars) == 100
    assert len(banner.shooting_stars) == 2
    assert len(banner.moons) == 6
    assert banner.shutter is None
    assert (banner.planet.x, banner.planet.y) == (1100, 275)


def test_same_seed_same_sky():
    a = BannerState(BANNER_VARIANTS["wide"], rng=random.Random(7))
    b = BannerState(BANNER_VARIANTS["wide"], rng=random.Random(7))
    assert [(s.x, s.y, s.color) for s in a.stars] == [(s.x, s.y, s.color) for s in b.stars]
    assert [m.angle for m in a.moons] == [m.angle for m in b.moons]


def test_step_advances_everything(banner):
    phases = [s.phase for s in banner.stars]
    angles = [m.angle for m in banner.moons]
    banner.step()
    assert all(s.phase > p for s, p in zip(banner.stars, phases))
    assert all(m.angle > a for m, a in zip(banner.moons, angles))
    assert banner.frame == 1


def test_first_step_reports_every_moon_rightward(banner):
    banner.step()
    assert banner.moving_right == [True] * 6


def test_moon_layers_split_by_direction(banner):
    for _ in range(200):
        banner.step()
        behind, front = banner.moon_layers()
        assert len(behind) + len(front) == len(banner.moons)
        assert all(m.position.x > m.last_x for m in behind)
        assert all(m.position.x <= m.last_x for m in front)


def test_shutter_variant_steps_shutter(shutter_banner):
    shutter = shutter_banner.shutter
    shutter.close()
    for _ in range(30):
        shutter_banner.step()
    assert shutter.offset == 0
    assert shutter.state is ShutterState.IDLE


def test_resize_reasserts_size_and_keeps_shutter_offset(shutter_banner):
    shutter_banner.shutter.close()
    for _ in range(5):
        shutter_banner.step()
    shutter_banner.width, shutter_banner.height = 10, 10
    shutter_banner.resize()
    assert (shutter_banner.width, shutter_banner.height) == (1200, 300)
    assert shutter_banner.shutter.offset == -250


def test_custom_config_and_moons():
    config = BannerConfig("tiny", 400, 100, star_count=3, shooting_star_count=0)
    state = BannerState(config, rng=random.Random(1), moons=[(1, 50, "#FFFFFF")])
    state.step()
    assert len(state.stars) == 3
    assert state.shooting_stars == []
    assert state.moons[0].orbital_radius == 50
