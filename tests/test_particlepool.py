from dataclasses import dataclass, field

from katana.particlepool import ParticlePool


@dataclass
class FakeParticle:
    name: str
    is_active: bool = True


@dataclass
class RecordingUpdater:
    calls: list = field(default_factory=list)

    def update(self, particle, game_time):
        self.calls.append((particle.name, game_time))


@dataclass
class RecordingRenderer:
    calls: list = field(default_factory=list)

    def draw(self, particle, sprite_batch):
        self.calls.append((particle.name, sprite_batch))


def make_pool(*particles):
    pool = ParticlePool(RecordingUpdater(), RecordingRenderer())
    for particle in particles:
        pool.add_particle(particle)
    return pool


def test_update_only_active_particles():
    pool = make_pool(FakeParticle("a"), FakeParticle("b", False), FakeParticle("c"))
    pool.update("time")
    assert pool.updater.calls == [("a", "time"), ("c", "time")]


def test_draw_only_active_particles():
    pool = make_pool(FakeParticle("a", False), FakeParticle("b"))
    pool.draw("batch")
    assert pool.renderer.calls == [("b", "batch")]


def test_get_inactive_particle_returns_first_inactive():
    second = FakeParticle("b", False)
    third = FakeParticle("c", False)
    pool = make_pool(FakeParticle("a"), second, third)
    assert pool.get_inactive_particle() is second


def test_get_inactive_particle_none_when_all_active():
    pool = make_pool(FakeParticle("a"), FakeParticle("b"))
    assert pool.get_inactive_particle() is None


def test_add_particle_grows_pool():
    pool = make_pool()
    assert len(pool) == 0
    particle = FakeParticle("a")
    pool.add_particle(particle)
    assert list(pool) == [particle]


def test_reactivated_particle_is_updated():
    particle = FakeParticle("a", False)
    pool = make_pool(particle)
    pool.update(1)
    assert pool.updater.calls == []
    pool.get_inactive_particle().is_active = True
    pool.update(2)
    assert pool.updater.calls == [("a", 2)]