# src/tests/test_collision.py
from src.platformer.collision import (
    rects_overlap, separation_side, resolve_platform_collisions,
    check_flag_touch, check_fall_out, check_spike_hit
)
from src.platformer.config import HEIGHT, FALL_MARGIN, SPAWN_X, SPAWN_Y, SIM_DT
from src.platformer.level import Flag, Platform, Spike
from src.platformer.player import Controls, Player


def plat(x, y, w, h) -> Platform:
    return Platform(x=float(x), y=float(y), w=float(w), h=float(h))


GROUND = plat(0, 400, 800, 20)


def test_overlap_is_strict():
    a = (0.0, 0.0, 40.0, 40.0)
    assert rects_overlap(a, (39.0, 39.0, 10.0, 10.0))
    assert not rects_overlap(a, (40.0, 0.0, 10.0, 10.0)), "shared edge is not an overlap"
    assert not rects_overlap(a, (0.0, 40.0, 10.0, 10.0))


def test_tie_break_order():
    # top == left
    assert separation_side((0.0, 0.0, 40.0, 40.0), (20.0, 20.0, 40.0, 40.0)) == "top"
    # bottom == right
    assert separation_side((20.0, 20.0, 40.0, 40.0), (0.0, 0.0, 40.0, 40.0)) == "bottom"
    # left == right, vertical overlaps larger
    assert separation_side((0.0, 0.0, 10.0, 100.0), (-5.0, 0.0, 20.0, 100.0)) == "left"


def test_landing_resets_jumps():
    p = Player(x=100.0, y=361.0, vy=5.0, jump_count=2)
    grounded = resolve_platform_collisions(p, [GROUND])
    assert grounded and p.grounded
    assert p.y == 360.0 and p.vy == 0.0
    assert p.jump_count == 0


def test_head_bump_stops_rise_but_keeps_jumps():
    ceiling = plat(0, 100, 200, 20)
    p = Player(x=50.0, y=119.0, vy=-8.0, jump_count=1)
    grounded = resolve_platform_collisions(p, [ceiling])
    assert not grounded
    assert p.y == 120.0 and p.vy == 0.0
    assert p.jump_count == 1


def test_side_pushes_leave_vertical_velocity():
    wall = plat(300, 0, 20, 400)
    p = Player(x=262.0, y=100.0, vy=3.0)
    resolve_platform_collisions(p, [wall])
    assert p.x == 260.0 and p.vy == 3.0

    p = Player(x=318.0, y=100.0, vy=3.0)
    resolve_platform_collisions(p, [wall])
    assert p.x == 320.0 and p.vy == 3.0


def test_resolution_uses_corrected_position():
    # After landing on the first block the player no longer touches the second;
    # resolving against the stale box would lift it to y=361
    low = plat(0, 400, 100, 20)
    sliver = plat(20, 401, 40, 3)
    p = Player(x=20.0, y=362.0, vy=2.0)
    resolve_platform_collisions(p, [low, sliver])
    assert p.y == 360.0 and p.x == 20.0


def test_rest_on_platform_is_stable():
    p = Player(x=100.0, y=360.0)
    for step in range(600):
        p.update(Controls(), SIM_DT)
        resolve_platform_collisions(p, [GROUND])
        assert p.y == GROUND.y - p.h, f"drifted at step {step}: y={p.y}"
        assert p.vy == 0.0


def test_flag_touch_latches():
    flag = Flag(x=1400.0, y=150.0)
    p = Player(x=1400.0, y=170.0)
    assert check_flag_touch(p, flag) is True
    assert flag.is_reached
    assert check_flag_touch(p, flag) is False, "only the first touch is a transition"

    p.x, p.y = 0.0, 0.0
    check_flag_touch(p, flag)
    assert flag.is_reached, "flag never un-reaches"


def test_fall_out_respawns():
    p = Player(x=1100.0, y=HEIGHT + FALL_MARGIN, vy=12.0, jump_count=2)
    assert not check_fall_out(p, HEIGHT), "exactly at the limit is still in bounds"

    p.y += 0.5
    assert check_fall_out(p, HEIGHT)
    assert (p.x, p.y) == (SPAWN_X, SPAWN_Y)
    assert p.vy == 0.0 and p.jump_count == 0


def test_spike_contact_kills():
    spike = Spike(x=120.0, y=400.0, width=20.0, height=30.0)
    p = Player(x=140.0, y=360.0)
    assert not check_spike_hit(p, [spike]) and p.is_alive

    p.x = 100.0
    assert check_spike_hit(p, [spike])
    assert not p.is_alive


def main():
    test_overlap_is_strict()
    test_tie_break_order()
    test_landing_resets_jumps()
    test_head_bump_stops_rise_but_keeps_jumps()
    test_side_pushes_leave_vertical_velocity()
    test_resolution_uses_corrected_position()
    test_rest_on_platform_is_stable()
    test_flag_touch_latches()
    test_fall_out_respawns()
    test_spike_contact_kills()
    print("✓ collision tests passed")


if __name__ == "__main__":
    main()
