"""CPU simulation of particle emitters and a pool of reusable emitters."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass, field

from quadsim.colors import BlendMode, Color, ColorCurve
from quadsim.curve import BatchedCurve, Curve
from quadsim.geometry import Vec2
from quadsim.shapes import (
    AtlasConfig,
    EmissionShape,
    ParticleShape,
    PointEmission,
    RectangleShape,
)

FULL_UV = (0.0, 0.0, 1.0, 1.0)
_U16_MAX = 0xFFFF


@dataclass
class EmitterConfig:
    """Settings of an emitter; every randomness value is a 0..1 ratio."""

    local_coords: bool = False
    emission_shape: EmissionShape = PointEmission()
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = RectangleShape(aspect_ratio=1.0)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = ColorCurve()
    gravity: Vec2 = Vec2(0.0, 0.0)
    atlas: AtlasConfig | None = None


@dataclass
class Particle:
    """State of one live particle."""

    pos: Vec2
    rotation: float
    size: float
    color: Color
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    spawn_index: int
    lived: float = 0.0
    life_fraction: float = 0.0
    frame: int = 0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)


def _randomized(base: float, randomness: float, rng: random.Random) -> float:
    return base - base * rng.uniform(0.0, randomness)


def _initial_velocity(direction: Vec2, spread: float, speed: float,
                      rng: random.Random) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec2(
        (direction.x * cos_a - direction.y * sin_a) * speed,
        (direction.x * sin_a + direction.y * cos_a) * speed,
    )


class Emitter:
    """Spawns, ages and retires particles according to an EmitterConfig."""

    def __init__(self, config: EmitterConfig | None = None,
                 rng: random.Random | None = None) -> None:
        self.config = config if config is not None else EmitterConfig()
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.blend_mode = self.config.blend_mode
        self.geometry = self.config.shape.geometry()
        self.mesh_dirty = False
        self.batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_current_cycle = 0
        self._particles_spawned = 0

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_spawned = 0
        self._particles_current_cycle = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after `config.size_curve` changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from `config.shape` on the next update."""
        self.mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        rng = self.rng
        offset = offset + config.emission_shape.random_point(rng)
        size = _randomized(config.size, config.size_randomness, rng)
        rotation = _randomized(config.initial_rotation,
                               config.initial_rotation_randomness, rng)
        pos = offset if config.local_coords else self.position + offset
        speed = _randomized(config.initial_velocity,
                            config.initial_velocity_randomness, rng)
        velocity = _initial_velocity(config.initial_direction,
                                     config.initial_direction_spread, speed, rng)
        angular_velocity = _randomized(config.initial_angular_velocity,
                                       config.initial_angular_velocity_randomness, rng)
        lifetime = _randomized(config.lifetime, config.lifetime_randomness, rng)

        self.particles.append(
            Particle(
                pos=pos,
                rotation=rotation,
                size=size,
                color=config.colors_curve.start,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
                spawn_index=self._particles_spawned,
            )
        )
        self._particles_spawned += 1
        self._particles_current_cycle += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Immediately emit `n` particles, ignoring `emitting` and `amount`."""
        for _ in range(n):
            self._emit_particle(pos)
            self._particles_spawned += 1

    def _spawn_count(self) -> int:
        config = self.config
        if config.amount <= 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return max(0, int((self._time_passed - self._last_emit_time) / gap))

    def update(self, dt: float) -> None:
        """Advance the simulation by `dt` seconds."""
        config = self.config
        if self.mesh_dirty:
            self.geometry = config.shape.geometry()
            self.mesh_dirty = False

        if config.emitting:
            self._time_passed += dt
            for _ in range(self._spawn_count()):
                self._last_emit_time = self._time_passed
                if self._particles_spawned < config.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= config.amount:
                    break

        if config.one_shot and self._particles_current_cycle >= config.amount:
            self._time_passed = 0.0
            self._last_emit_time = 0.0
            self._particles_current_cycle = 0
            config.emitting = False

        for particle in self.particles:
            self._age(particle, dt)

        survivors: list[Particle] = []
        for particle in self.particles:
            if particle.lived >= particle.lifetime or particle.lived > config.lifetime:
                if particle.lived != particle.lifetime:
                    self._particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def _age(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * config.angular_accel * dt
        particle.angular_velocity *= 1.0 - config.angular_damping

        fraction = particle.lived / particle.lifetime if particle.lifetime else 1.0
        particle.color = config.colors_curve.at(fraction)
        particle.pos = particle.pos + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self.batched_size_curve.get(fraction) if self.batched_size_curve else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.life_fraction = particle.lived / particle.lifetime

        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt

        atlas = config.atlas
        if atlas is None:
            particle.uv = FULL_UV
            return
        if particle.lifetime != 0.0:
            progress = particle.lived / particle.lifetime * (atlas.end_index - atlas.start_index)
            particle.frame = min(max(int(progress), 0), _U16_MAX) + atlas.start_index
        particle.uv = atlas.frame_uv(particle.frame)

    def advance(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at `pos` and advance it by `dt` seconds."""
        self.blend_mode = self.config.blend_mode
        self.position = pos
        self.update(dt)


class EmittersCache:
    """Pool of emitters sharing one config; finished emitters are reused."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self._cache: list[Emitter] = [
            self._new_emitter(emitting=False) for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self._active: list[tuple[Emitter, Vec2]] = []

    def _new_emitter(self, emitting: bool) -> Emitter:
        config = copy.deepcopy(self.config)
        config.emitting = emitting
        return Emitter(config, self.rng)

    @property
    def active(self) -> list[tuple[Emitter, Vec2]]:
        """Emitters currently running, with their positions."""
        return list(self._active)

    @property
    def cached_count(self) -> int:
        """Number of idle emitters waiting to be reused."""
        return len(self._cache)

    def spawn(self, pos: Vec2) -> Emitter:
        """Start an emitter at `pos`, reusing an idle one when available."""
        emitter = self._cache.pop() if self._cache else self._new_emitter(emitting=True)
        emitter.mesh_dirty = True
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, pos))
        return emitter

    def update(self, dt: float) -> None:
        """Advance every active emitter; those that stopped go back to the pool."""
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self._active:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active