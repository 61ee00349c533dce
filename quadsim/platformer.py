"""Pixel-stepped platformer physics with tile layers, actors and moving solids."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from quadsim.geometry import Rect, Vec2


class Tile(Enum):
    """Content of a collision tile."""

    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two tile probes; anything but empty/jump-through mixes is solid."""
        passable = (Tile.EMPTY, Tile.JUMP_THROUGH)
        if self is Tile.EMPTY and other is Tile.EMPTY:
            return Tile.EMPTY
        if self in passable and other in passable:
            return Tile.JUMP_THROUGH
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle of an actor in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a moving solid in a World."""

    index: int


@dataclass
class StaticTiledLayer:
    """A grid of static collision tiles stored row by row."""

    static_colliders: list[Tile]
    tile_width: float
    tile_height: float
    width: int
    tag: int


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, float(self.width), float(self.height))


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class World:
    """Collision world holding static tile layers, actors and solids."""

    def __init__(self) -> None:
        self._layers: list[StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(self, static_colliders, tile_width, tile_height, width, tag):
        """Add a layer of tiles laid out row by row, `width` tiles per row."""
        self._layers.append(
            StaticTiledLayer(list(static_colliders), tile_width, tile_height, width, tag)
        )

    def add_actor(self, pos, width, height):
        """Create an actor; one spawned inside a jump-through tile starts descending."""
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) is Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(pos=pos, width=width, height=height,
                      descent=inside_wood, seen_wood=inside_wood)
        )
        return actor

    def add_solid(self, pos, width, height):
        """Create a moving solid."""
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos=pos, width=width, height=height))
        return solid

    def set_actor_position(self, actor, pos):
        """Teleport an actor, dropping any sub-pixel remainder."""
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = pos

    def descent(self, actor):
        """Let the actor fall through jump-through tiles."""
        self._actors[actor.index].descent = True

    def move_v(self, actor, dy):
        """Move vertically pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.y_remainder += dy

        move = _round(collider.y_remainder)
        if move != 0:
            collider.y_remainder -= move
            sign = _sign(move)
            while move != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(0.0, float(sign)), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile is Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile is Tile.EMPTY or (tile is Tile.JUMP_THROUGH and collider.descent):
                    collider.pos = Vec2(collider.pos.x, collider.pos.y + sign)
                    move -= sign
                else:
                    return False

        if self.collide_solids(collider.pos, collider.width, collider.height) is not Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor, dx):
        """Move horizontally pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.x_remainder += dx

        move = _round(collider.x_remainder)
        if move != 0:
            collider.x_remainder -= move
            sign = _sign(move)
            while move != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(float(sign), 0.0), collider.width, collider.height
                )
                if tile is Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = Vec2(collider.pos.x + sign, collider.pos.y)
                    move -= sign
                else:
                    return False
        return True

    def solid_move(self, solid, dx, dy):
        """Move a solid, carrying riders and pushing (or squishing) actors."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round(collider.x_remainder)
        move_y = _round(collider.y_remainder)

        riding_rect = Rect(collider.pos.x, collider.pos.y - 1.0, float(collider.width), 1.0)
        pushing_rect = Rect(
            collider.pos.x + move_x, collider.pos.y,
            float(collider.width), float(collider.height),
        )

        riding_actors: list[Actor] = []
        pushing_actors: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            rider_rect = Rect(
                actor_collider.pos.x,
                actor_collider.pos.y + actor_collider.height - 1.0,
                float(actor_collider.width),
                1.0,
            )
            pushed = pushing_rect.overlaps(actor_collider.rect())
            if riding_rect.overlaps(rider_rect):
                riding_actors.append(Actor(index))
            elif pushed and not actor_collider.squished:
                pushing_actors.append(Actor(index))

            if not pushed:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding_actors:
            self.move_h(actor, float(move_x))
        for actor in pushing_actors:
            if not self.move_h(actor, float(move_x)):
                pushed_collider = self._actors[actor.index]
                pushed_collider.squished = True
                pushed_collider.squishers.add(solid)
        collider.collidable = True

        if move_x != 0:
            collider.x_remainder -= move_x
            collider.pos = Vec2(collider.pos.x + move_x, collider.pos.y)
        if move_y != 0:
            collider.y_remainder -= move_y
            collider.pos = Vec2(collider.pos.x, collider.pos.y + move_y)

    def solid_at(self, pos):
        """True if the point is blocked by a tag-1 tile or a solid."""
        return self.tag_at(pos, 1)

    def tag_at(self, pos, tag):
        """Check the first non-empty tile at a point against `tag`, else any solid."""
        for layer in self._layers:
            y = int(pos.y / layer.tile_width)
            x = int(pos.x / layer.tile_height)
            ix = y * layer.width + x
            if 0 <= ix < len(layer.static_colliders) and layer.static_colliders[ix] is not Tile.EMPTY:
                return layer.tag == tag
        return any(s.collidable and s.rect().contains(pos) for s in self._solids)

    def collide_solids(self, pos, width, height):
        """Tile hit by a box from tag-1 layers, or COLLIDER if it overlaps a solid."""
        tile = self.collide_tag(1, pos, width, height)
        if tile is not Tile.EMPTY:
            return tile
        box = Rect(pos.x, pos.y, float(width), float(height))
        if any(s.collidable and s.rect().overlaps(box) for s in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag, pos, width, height):
        """Tile hit by a box among layers carrying `tag`."""
        for layer in self._layers:
            colliders = layer.static_colliders
            layer_height = len(colliders) // layer.width + 1

            def check(point: Vec2, layer=layer, colliders=colliders, layer_height=layer_height) -> Tile:
                y = int(point.y / layer.tile_width)
                x = int(point.x / layer.tile_height)
                ix = y * layer.width + x
                if (
                    0 <= y < layer_height
                    and 0 <= x < layer.width
                    and 0 <= ix < len(colliders)
                    and layer.tag == tag
                    and colliders[ix] is not Tile.EMPTY
                ):
                    return colliders[ix]
                return Tile.EMPTY

            far_x = width - 1.0
            far_y = height - 1.0
            tile = (
                check(pos)
                .combine(check(pos + Vec2(far_x, 0.0)))
                .combine(check(pos + Vec2(far_x, far_y)))
                .combine(check(pos + Vec2(0.0, far_y)))
            )
            if tile is not Tile.EMPTY:
                return tile

            if width > int(layer.tile_width):
                x = pos.x
                while True:
                    x += layer.tile_width
                    if not x < pos.x + width - 1.0:
                        break
                    tile = check(Vec2(x, pos.y)).combine(check(Vec2(x, pos.y + far_y)))
                    if tile is not Tile.EMPTY:
                        return tile

            if height > int(layer.tile_height):
                y = pos.y
                while True:
                    y += layer.tile_height
                    if not y < pos.y + height - 1.0:
                        break
                    tile = check(Vec2(pos.x, y)).combine(check(Vec2(pos.x + far_x, y)))
                    if tile is not Tile.EMPTY:
                        return tile
        return Tile.EMPTY

    def squished(self, actor):
        """True if the actor is currently pinned by a solid."""
        return self._actors[actor.index].squished

    def actor_pos(self, actor):
        return self._actors[actor.index].pos

    def solid_pos(self, solid):
        return self._solids[solid.index].pos

    def collide_check(self, actor, pos):
        """True if the actor placed at `pos` would be blocked."""
        collider = self._actors[actor.index]
        tile = self.collide_solids(pos, collider.width, collider.height)
        blocking = {Tile.SOLID, Tile.COLLIDER}
        if not collider.descent:
            blocking.add(Tile.JUMP_THROUGH)
        return tile in blocking