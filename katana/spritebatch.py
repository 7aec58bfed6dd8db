"""Batched drawing of sprites and text with shared sort and blend settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from katana.color import Color


class TextAlign(Enum):
    """Horizontal alignment of drawn text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SpriteSortMode(Enum):
    """How queued sprites are ordered before rendering."""

    BACK_TO_FRONT = 0
    DEFERRED = 1
    FRONT_TO_BACK = 2
    IMMEDIATE = 3
    TEXTURE = 4


class BlendState(Enum):
    """How overlapping sprites are blended."""

    ALPHA = 0
    ADDITIVE = 1


class _Texture(Protocol):
    width: int
    height: int
    resource_id: int


class _Region(Protocol):
    x: int
    y: int
    width: int
    height: int


@dataclass
class Drawable:
    """One queued draw operation: either a texture region or a string of text."""

    is_bitmap: bool
    color: Color
    x: int
    y: int
    depth: float = 0.0
    font: Any = None
    text: str = ""
    align: TextAlign = TextAlign.LEFT
    texture: Any = None
    rotation: float = 0.0
    cx: int = 0
    cy: int = 0
    sx: int = 0
    sy: int = 0
    sw: int = 0
    sh: int = 0
    scale_x: float = 1.0
    scale_y: float = 1.0
    texture_id: int = 0


Renderer = Callable[[Drawable], None]


def _ignore(_drawable: Drawable) -> None:
    return None


class SpriteBatch:
    """Collects draw operations between begin() and end() and hands them to a renderer.

    The renderer is a callable receiving each Drawable in its final draw order;
    it can read the active blend state and transform through batch_settings().
    """

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self._renderer: Renderer = renderer or _ignore
        self._drawables: list[Drawable] = []
        self._sort_mode = SpriteSortMode.DEFERRED
        self._blend_state = BlendState.ALPHA
        self._transform: Any = None
        self._is_started = False

    @property
    def is_started(self) -> bool:
        """True between begin() and end()."""
        return self._is_started

    @property
    def pending(self) -> list[Drawable]:
        """Drawables queued and not yet rendered."""
        return list(self._drawables)

    def begin(
        self,
        sort_mode: SpriteSortMode = SpriteSortMode.DEFERRED,
        blend_state: BlendState = BlendState.ALPHA,
        transform: Any = None,
    ) -> None:
        """Start a batch with the given sort mode, blend state and screen transform."""
        self._is_started = True
        self._sort_mode = sort_mode
        self._blend_state = blend_state
        self._transform = transform

    def end(self) -> None:
        """Sort and render the queued drawables, then close the batch."""
        if self._sort_mode is not SpriteSortMode.IMMEDIATE:
            drawables = self._drawables
            if self._sort_mode is SpriteSortMode.BACK_TO_FRONT:
                drawables = sorted(drawables, key=lambda d: d.depth)
            elif self._sort_mode is SpriteSortMode.FRONT_TO_BACK:
                drawables = sorted(drawables, key=lambda d: -d.depth)
            for drawable in drawables:
                self._renderer(drawable)
        self._drawables.clear()
        self._transform = None
        self._is_started = False

    def _require_started(self, action: str) -> None:
        if not self._is_started:
            raise RuntimeError(f"begin must be called before {action}")

    def _submit(self, drawable: Drawable) -> None:
        if self._sort_mode is SpriteSortMode.IMMEDIATE:
            self._renderer(drawable)
        else:
            self._drawables.append(drawable)

    def draw_string(
        self,
        font: Any,
        text: str,
        position: tuple[float, float],
        color: Color = Color.WHITE,
        alignment: TextAlign = TextAlign.LEFT,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue a string of text at a screen position."""
        self._require_started("a draw function can be run")
        self._submit(
            Drawable(
                is_bitmap=False,
                color=color,
                x=int(position[0]),
                y=int(position[1]),
                depth=draw_depth,
                font=font,
                text=text,
                align=alignment,
            )
        )

    def draw(
        self,
        texture: _Texture,
        position: tuple[float, float],
        region: Optional[_Region] = None,
        color: Color = Color.WHITE,
        origin: tuple[float, float] = (0.0, 0.0),
        scale: tuple[float, float] = (1.0, 1.0),
        rotation: float = 0.0,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue a texture, or a region of it, at a screen position.

        Without a region the whole texture is drawn.
        """
        self._require_started("a draw function can be run")
        if region is None:
            sx, sy, sw, sh = 0, 0, texture.width, texture.height
        else:
            sx, sy, sw, sh = region.x, region.y, region.width, region.height
        self._submit(
            Drawable(
                is_bitmap=True,
                color=color,
                x=int(position[0]),
                y=int(position[1]),
                depth=draw_depth,
                texture=texture,
                rotation=rotation,
                cx=int(origin[0]),
                cy=int(origin[1]),
                sx=sx,
                sy=sy,
                sw=sw,
                sh=sh,
                scale_x=scale[0],
                scale_y=scale[1],
                texture_id=texture.resource_id,
            )
        )

    def draw_animation(
        self,
        animation: Any,
        position: tuple[float, float],
        color: Color = Color.WHITE,
        origin: tuple[float, float] = (0.0, 0.0),
        scale: tuple[float, float] = (1.0, 1.0),
        rotation: float = 0.0,
        draw_depth: float = 0.0,
    ) -> None:
        """Queue the current frame of an animation."""
        self.draw(
            animation.texture,
            position,
            animation.current_frame,
            color,
            origin,
            scale,
            rotation,
            draw_depth,
        )

    def batch_settings(self) -> tuple[SpriteSortMode, BlendState, Any]:
        """Return (sort_mode, blend_state, transform) of the running batch."""
        self._require_started("the settings can be retrieved")
        return (self._sort_mode, self._blend_state, self._transform)