"""Frame-based sprite sheet animations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Protocol

from katana.resource import Resource, split, strip_comment

DEFAULT_SECONDS_PER_FRAME = 0.6

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_int(text: str) -> int:
    match = _INT_PATTERN.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    match = _FLOAT_PATTERN.match(text)
    return float(match.group(1)) if match else 0.0


class _TimeSource(Protocol):
    elapsed_time: float


@dataclass
class Frame:
    """Position and size of one frame within a sprite sheet."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class Animation(Resource):
    """Timing and framing values for a texture animation.

    An animation file holds, one per line, the sprite sheet path, the
    seconds per frame and then one ``x,y,width,height`` line per frame.
    ``//`` starts a comment.
    """

    def __init__(self, frames: list[Frame] | None = None) -> None:
        super().__init__()
        self.frames: list[Frame] = list(frames) if frames else []
        self.texture: Any = None
        self.seconds_per_frame: float = DEFAULT_SECONDS_PER_FRAME
        self._current_frame_time: float = self.seconds_per_frame
        self._current_index: int = 0
        self._loop_counter: int = -1
        self._is_playing: bool = True

    @property
    def current_index(self) -> int:
        """Index of the frame being shown."""
        return self._current_index

    @property
    def current_frame(self) -> Frame:
        """The frame being shown."""
        return self.frames[self._current_index]

    def frame(self, index: int) -> Frame:
        """Return the frame at index."""
        return self.frames[index]

    @property
    def is_playing(self) -> bool:
        """True while the animation advances on update."""
        return self._is_playing

    @property
    def loop_count(self) -> int:
        """Loops left before the animation stops; negative loops forever."""
        return self._loop_counter

    def update(self, game_time: _TimeSource) -> None:
        """Advance the animation by the time elapsed since the last frame."""
        if not self._is_playing:
            return
        self._current_frame_time -= game_time.elapsed_time
        if self._current_frame_time > 0:
            return
        self._current_index += 1
        self._current_frame_time = self.seconds_per_frame
        if self._current_index == len(self.frames):
            if self._loop_counter > 0:
                self._loop_counter -= 1
            elif self._loop_counter == 0:
                self.stop()
            else:
                self._current_index = 0

    def load(self, path: str, manager: Any) -> None:
        """Read an animation file; the sprite sheet is loaded through manager.load.

        Raises OSError if the file cannot be read and ValueError for a frame
        line with fewer than four fields.
        """
        loading_sprite_sheet = True
        loading_frame_time = True
        with open(path, encoding="utf-8") as stream:
            for raw in stream:
                line = strip_comment(raw.rstrip("\n"))
                if not line:
                    continue
                if loading_sprite_sheet:
                    self.texture = manager.load(line)
                    loading_sprite_sheet = False
                elif loading_frame_time:
                    self.seconds_per_frame = _to_float(line)
                    loading_frame_time = False
                else:
                    fields = split(line, ",")
                    if len(fields) < 4:
                        raise ValueError(f"frame line needs x,y,width,height: {line!r}")
                    self.frames.append(Frame(*(_to_int(field) for field in fields[:4])))

    def is_cloneable(self) -> bool:
        """Animations are cloned so that users do not play in lockstep."""
        return True

    def clone(self) -> Animation:
        """Return a new animation sharing texture and frames, with its own state."""
        copy = Animation(self.frames)
        copy.texture = self.texture
        copy.seconds_per_frame = self.seconds_per_frame
        copy._is_playing = self._is_playing
        copy._current_frame_time = self._current_frame_time
        copy._current_index = self._current_index
        return copy

    def set_current_frame(self, index: int) -> None:
        """Jump to a frame and restart its timer; invalid indices are ignored."""
        if 0 <= index < len(self.frames):
            self._current_index = index
            self._current_frame_time = self.seconds_per_frame

    def play(self) -> None:
        """Start or resume the animation."""
        self._is_playing = True

    def pause(self) -> None:
        """Pause the animation."""
        self._is_playing = False

    def stop(self) -> None:
        """Pause the animation and return to the first frame."""
        self.pause()
        self.set_current_frame(0)

    def set_loop_count(self, loops: int = -1) -> None:
        """Set how many more loops play before stopping; -1 loops forever."""
        self._loop_counter = loops