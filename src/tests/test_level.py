# src/tests/test_level.py
from src.platformer.config import PLATFORM_LAYOUT, FLAG_POS
from src.platformer.level import (
    Platform, Spike, build_level, box_intersects_triangle
)


def _mover(speed: float, vertical: bool = False) -> Platform:
    return Platform(
        x=200.0, y=300.0, w=200.0, h=20.0,
        vx=0.0 if vertical else speed, vy=speed if vertical else 0.0,
        start_x=200.0, start_y=300.0, move_distance=100.0, is_moving=True,
    )


def test_moving_platform_flips_exactly_at_bounds():
    plat = _mover(2.0)
    lo, hi = 100.0, 300.0
    flips = 0
    for _ in range(1000):
        prev_vx = plat.vx
        plat.advance()
        assert lo <= plat.x <= hi, f"origin left its range: {plat.x}"
        at_bound = plat.x in (lo, hi)
        flipped = (plat.vx > 0) != (prev_vx > 0)
        assert at_bound == flipped, f"flip mismatch at x={plat.x}"
        if plat.x == hi:
            assert plat.vx < 0
        if plat.x == lo:
            assert plat.vx > 0
        flips += int(flipped)
    assert flips >= 9


def test_uneven_speed_is_clamped_onto_bound():
    plat = _mover(3.7)
    seen = set()
    for _ in range(500):
        plat.advance()
        assert 100.0 <= plat.x <= 300.0
        if plat.x in (100.0, 300.0):
            seen.add(plat.x)
    assert seen == {100.0, 300.0}


def test_vertical_mover_keeps_x():
    plat = _mover(2.0, vertical=True)
    for _ in range(300):
        plat.advance()
        assert plat.x == 200.0
        assert 200.0 <= plat.y <= 400.0


def test_static_platform_never_moves():
    plat = Platform(x=0.0, y=400.0, w=800.0, h=20.0, vx=2.0, is_moving=False)
    for _ in range(10):
        plat.advance()
    assert (plat.x, plat.y) == (0.0, 400.0)


def test_default_level_layout():
    level = build_level()
    assert len(level.platforms) == len(PLATFORM_LAYOUT)
    assert sum(p.is_moving for p in level.platforms) == 2
    assert (level.flag.x, level.flag.y) == FLAG_POS
    assert not level.flag.is_reached
    assert level.spikes == []


def test_build_level_returns_fresh_platforms():
    a, b = build_level(), build_level()
    a.platforms[1].advance()
    assert a.platforms[1].x != b.platforms[1].x


def test_flag_reach_is_a_latch():
    flag = build_level().flag
    assert flag.reach() is True
    assert flag.reach() is False
    assert flag.is_reached


def test_box_vs_spike_triangle():
    spike = Spike(x=500.0, y=400.0, width=20.0, height=30.0)
    tri = spike.world_points()
    assert tri == ((490.0, 400.0), (510.0, 400.0), (500.0, 370.0))
    assert box_intersects_triangle((480.0, 360.0, 40.0, 40.0), tri)       # covers the tip
    assert box_intersects_triangle((505.0, 380.0, 40.0, 40.0), tri)       # clips the right edge
    assert not box_intersects_triangle((440.0, 360.0, 40.0, 20.0), tri)   # left of it, above the base
    assert not box_intersects_triangle((508.0, 360.0, 20.0, 15.0), tri)   # beside the tip


def test_spike_contact_is_inclusive():
    tri = Spike(x=500.0, y=400.0, width=20.0, height=30.0).world_points()
    assert box_intersects_triangle((470.0, 400.0, 20.0, 10.0), tri)       # corner on the base vertex
    assert box_intersects_triangle((500.0, 360.0, 20.0, 10.0), tri)       # bottom edge through the tip
    assert not box_intersects_triangle((515.0, 400.0, 20.0, 10.0), tri)   # collinear with the base, past it


def main():
    test_moving_platform_flips_exactly_at_bounds()
    test_uneven_speed_is_clamped_onto_bound()
    test_vertical_mover_keeps_x()
    test_static_platform_never_moves()
    test_default_level_layout()
    test_build_level_returns_fresh_platforms()
    test_flag_reach_is_a_latch()
    test_box_vs_spike_triangle()
    test_spike_contact_is_inclusive()
    print("✓ level tests passed")


if __name__ == "__main__":
    main()
