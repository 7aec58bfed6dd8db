from dataclasses import dataclass

import pytest

from katana.animation import Animation, Frame
from katana.color import Color
from katana.spritebatch import BlendState, SpriteBatch, SpriteSortMode, TextAlign


@dataclass
class FakeTexture:
    width: int = 64
    height: int = 32
    resource_id: int = 7


def make_batch():
    rendered = []
    return SpriteBatch(rendered.append), rendered


def test_deferred_keeps_submission_order():
    batch, rendered = make_batch()
    batch.begin()
    batch.draw(FakeTexture(), (1, 1), draw_depth=0.9)
    batch.draw(FakeTexture(), (2, 2), draw_depth=0.1)
    assert rendered == []
    batch.end()
    assert [d.x for d in rendered] == [1, 2]


def test_back_to_front_sorts_ascending_depth():
    batch, rendered = make_batch()
    batch.begin(SpriteSortMode.BACK_TO_FRONT)
    for depth in (0.5, 0.1, 0.9):
        batch.draw(FakeTexture(), (0, 0), draw_depth=depth)
    batch.end()
    assert [d.depth for d in rendered] == [0.1, 0.5, 0.9]


def test_front_to_back_sorts_descending_depth():
    batch, rendered = make_batch()
    batch.begin(SpriteSortMode.FRONT_TO_BACK)
    for depth in (0.5, 0.1, 0.9):
        batch.draw(FakeTexture(), (0, 0), draw_depth=depth)
    batch.end()
    assert [d.depth for d in rendered] == [0.9, 0.5, 0.1]


def test_immediate_renders_at_once():
    batch, rendered = make_batch()
    batch.begin(SpriteSortMode.IMMEDIATE)
    batch.draw_string("font", "hello", (3, 4))
    assert len(rendered) == 1
    assert rendered[0].text == "hello"
    batch.end()
    assert len(rendered) == 1


def test_draw_before_begin_raises():
    batch, _ = make_batch()
    with pytest.raises(RuntimeError):
        batch.draw(FakeTexture(), (0, 0))
    with pytest.raises(RuntimeError):
        batch.draw_string("font", "x", (0, 0))


def test_batch_settings():
    batch, _ = make_batch()
    with pytest.raises(RuntimeError):
        batch.batch_settings()
    transform = object()
    batch.begin(SpriteSortMode.TEXTURE, BlendState.ADDITIVE, transform)
    assert batch.batch_settings() == (SpriteSortMode.TEXTURE, BlendState.ADDITIVE, transform)
    batch.end()
    assert batch.is_started is False


def test_full_texture_draw_uses_texture_size():
    batch, rendered = make_batch()
    texture = FakeTexture()
    batch.begin()
    batch.draw(texture, (5, 6))
    batch.end()
    d = rendered[0]
    assert d.is_bitmap
    assert (d.sx, d.sy, d.sw, d.sh) == (0, 0, texture.width, texture.height)
    assert d.texture_id == texture.resource_id
    assert d.color == Color.WHITE


def test_region_draw_uses_region():
    batch, rendered = make_batch()
    region = Frame(2, 3, 10, 12)
    batch.begin()
    batch.draw(FakeTexture(), (0, 0), region, Color.RED, (4, 5), (2.0, 3.0), 1.5)
    batch.end()
    d = rendered[0]
    assert (d.sx, d.sy, d.sw, d.sh) == (region.x, region.y, region.width, region.height)
    assert (d.cx, d.cy) == (4, 5)
    assert (d.scale_x, d.scale_y) == (2.0, 3.0)
    assert d.rotation == 1.5
    assert d.color == Color.RED


def test_draw_animation_uses_current_frame():
    animation = Animation([Frame(0, 0, 8, 8), Frame(8, 0, 8, 8)])
    animation.texture = FakeTexture()
    animation.set_current_frame(1)
    batch, rendered = make_batch()
    batch.begin()
    batch.draw_animation(animation, (1, 2))
    batch.end()
    assert rendered[0].sx == animation.current_frame.x
    assert rendered[0].texture is animation.texture


def test_end_clears_queue():
    batch, rendered = make_batch()
    batch.begin()
    batch.draw_string("font", "a", (0, 0), alignment=TextAlign.CENTER)
    assert len(batch.pending) == 1
    batch.end()
    assert batch.pending == []
    batch.begin()
    batch.end()
    assert len(rendered) == 1
    assert rendered[0].align is TextAlign.CENTER


def test_position_is_truncated_to_int():
    batch, rendered = make_batch()
    batch.begin()
    batch.draw_string("font", "t", (10.7, 20.2))
    batch.end()
    assert (rendered[0].x, rendered[0].y) == (10, 20)