"""A pool of reusable particles updated and drawn through shared strategies."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol


class _Particle(Protocol):
    is_active: bool


class _Updater(Protocol):
    def update(self, particle: Any, game_time: Any) -> None: ...


class _Renderer(Protocol):
    def draw(self, particle: Any, sprite_batch: Any) -> None: ...


class ParticlePool:
    """Holds particles; active ones are updated and drawn, inactive ones reused."""

    def __init__(self, updater: _Updater, renderer: _Renderer) -> None:
        self.updater = updater
        self.renderer = renderer
        self._particles: list[Any] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._particles)

    def _active(self) -> Iterator[Any]:
        return (particle for particle in self._particles if particle.is_active)

    def update(self, game_time: Any) -> None:
        """Update every active particle."""
        for particle in self._active():
            self.updater.update(particle, game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw every active particle."""
        for particle in self._active():
            self.renderer.draw(particle, sprite_batch)

    def get_inactive_particle(self) -> Optional[Any]:
        """Return the first inactive particle, or None if all are active."""
        return next((p for p in self._particles if not p.is_active), None)

    def add_particle(self, particle: Any) -> None:
        """Add a particle to the pool."""
        self._particles.append(particle)