import pytest

from quadsim.geometry import Vec2
from quadsim.platformer import Actor, Solid, Tile, World

TILE = 8.0
COLS = 4
E, S, J = Tile.EMPTY, Tile.SOLID, Tile.JUMP_THROUGH


def make_world(rows):
    world = World()
    tiles = [tile for row in rows for tile in row]
    world.add_static_tiled_layer(tiles, TILE, TILE, COLS, 1)
    return world


FLOOR_ROWS = [[E] * COLS, [E] * COLS, [E] * COLS, [S] * COLS]
WOOD_ROWS = [[E] * COLS, [E] * COLS, [J] * COLS, [S] * COLS]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (E, E, E),
        (J, J, J),
        (J, E, J),
        (E, J, J),
        (S, E, S),
        (E, S, S),
        (J, S, S),
        (Tile.COLLIDER, E, S),
    ],
)
def test_tile_combine(a, b, expected):
    assert a.combine(b) is expected


def test_collide_tag_hits_floor_only():
    world = make_world(FLOOR_ROWS)
    assert world.collide_tag(1, Vec2(0.0, 3 * TILE), 8, 8) is Tile.SOLID
    assert world.collide_tag(1, Vec2(0.0, 0.0), 8, 8) is Tile.EMPTY
    assert world.collide_tag(2, Vec2(0.0, 3 * TILE), 8, 8) is Tile.EMPTY


def test_collide_tag_wide_box_checks_middle():
    rows = [[E] * COLS, [E, S, E, E], [E] * COLS, [E] * COLS]
    world = make_world(rows)
    # Corners land in empty columns 0 and 2, the middle in the solid one.
    assert world.collide_tag(1, Vec2(0.0, TILE), 24, 8) is Tile.SOLID


def test_move_v_lands_on_floor():
    world = make_world(FLOOR_ROWS)
    actor = world.add_actor(Vec2(TILE, 0.0), 8, 8)
    assert world.move_v(actor, 100.0) is False
    assert world.actor_pos(actor).y + 8 == 3 * TILE
    assert world.collide_check(actor, world.actor_pos(actor) + Vec2(0.0, 1.0)) is True


def test_move_v_free_fall_returns_true():
    world = make_world(FLOOR_ROWS)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_v(actor, 3.0) is True
    assert world.actor_pos(actor) == Vec2(0.0, 3.0)


def test_subpixel_remainder_accumulates():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_v(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(0.0, 0.0)
    world.move_v(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(0.0, 1.0)


@pytest.mark.parametrize("delta", [0.5, -0.5])
def test_half_pixel_rounds_away_from_zero(delta):
    world = World()
    actor = world.add_actor(Vec2(10.0, 10.0), 8, 8)
    world.move_h(actor, delta)
    assert world.actor_pos(actor) == Vec2(10.0 + 2 * delta, 10.0)


def test_set_actor_position_drops_remainder():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_v(actor, 0.4)
    world.set_actor_position(actor, Vec2(5.0, 5.0))
    world.move_v(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(5.0, 5.0)


def test_move_h_blocked_by_wall():
    rows = [[E, E, E, S]] * 4
    world = make_world(rows)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_h(actor, 100.0) is False
    assert world.actor_pos(actor).x + 8 == 3 * TILE


def test_jump_through_stops_fall_without_descent():
    world = make_world(WOOD_ROWS)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_v(actor, 100.0) is False
    assert world.actor_pos(actor).y + 8 == 2 * TILE
    assert world.collide_check(actor, world.actor_pos(actor) + Vec2(0.0, 1.0)) is True


def test_descent_falls_through_wood():
    world = make_world(WOOD_ROWS)
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_v(actor, 100.0)
    world.descent(actor)
    assert world.collide_check(actor, world.actor_pos(actor) + Vec2(0.0, 1.0)) is False
    assert world.move_v(actor, 100.0) is False
    assert world.actor_pos(actor).y + 8 == 3 * TILE


def test_actor_spawned_in_wood_is_descending():
    world = make_world(WOOD_ROWS)
    actor = world.add_actor(Vec2(0.0, 2 * TILE), 8, 8)
    assert world.collide_check(actor, Vec2(0.0, 2 * TILE)) is False


def test_collide_solids_reports_collider():
    world = World()
    world.add_solid(Vec2(0.0, 0.0), 8, 8)
    assert world.collide_solids(Vec2(4.0, 4.0), 8, 8) is Tile.COLLIDER
    assert world.collide_solids(Vec2(20.0, 20.0), 8, 8) is Tile.EMPTY


def test_solid_pushes_actor():
    world = World()
    solid = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    actor = world.add_actor(Vec2(10.0, 0.0), 8, 8)
    world.solid_move(solid, 4.0, 0.0)
    assert world.solid_pos(solid) == Vec2(4.0, 0.0)
    assert world.actor_pos(actor) == Vec2(14.0, 0.0)
    assert world.squished(actor) is False


def test_solid_carries_rider():
    world = World()
    solid = world.add_solid(Vec2(0.0, 20.0), 16, 8)
    actor = world.add_actor(Vec2(0.0, 12.0), 8, 8)
    world.solid_move(solid, 3.0, 0.0)
    assert world.actor_pos(actor) == Vec2(3.0, 12.0)
    assert world.solid_pos(solid) == Vec2(3.0, 20.0)


def test_solid_vertical_move():
    world = World()
    solid = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    world.solid_move(solid, 0.0, 2.0)
    assert world.solid_pos(solid) == Vec2(0.0, 2.0)


def test_squish_and_release():
    world = World()
    mover = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    world.add_solid(Vec2(18.0, 0.0), 8, 8)
    actor = world.add_actor(Vec2(10.0, 0.0), 8, 8)
    world.solid_move(mover, 4.0, 0.0)
    assert world.squished(actor) is True
    world.solid_move(mover, -10.0, 0.0)
    assert world.squished(actor) is False


def test_solid_at_and_tag_at():
    world = make_world(FLOOR_ROWS)
    world.add_solid(Vec2(0.0, 0.0), 8, 8)
    assert world.solid_at(Vec2(1.0, 3 * TILE + 1.0)) is True
    assert world.tag_at(Vec2(1.0, 3 * TILE + 1.0), 2) is False
    assert world.solid_at(Vec2(1.0, 1.0)) is True
    assert world.solid_at(Vec2(20.0, TILE + 1.0)) is False


def test_unknown_handles_raise():
    world = World()
    with pytest.raises(IndexError):
        world.actor_pos(Actor(0))
    with pytest.raises(IndexError):
        world.solid_pos(Solid(3))


def test_handles_are_sequential_and_hashable():
    world = World()
    first = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    second = world.add_actor(Vec2(30.0, 0.0), 8, 8)
    assert first == Actor(0)
    assert second == Actor(1)
    assert len({first, second, Actor(0)}) == 2