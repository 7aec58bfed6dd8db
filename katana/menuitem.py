"""Items shown and selected in a menu screen."""

from __future__ import annotations

from typing import Any, Callable, Optional

from katana.color import Color
from katana.spritebatch import TextAlign

OnSelect = Callable[[], None]


class MenuItem:
    """One entry of a menu screen, drawn as text and selectable by the player."""

    def __init__(self, text: str = "Menu Item") -> None:
        self.text = text
        self.index = 0
        self.on_select: Optional[OnSelect] = None
        self.is_selected = False
        self.is_displayed = True
        self.font: Any = None
        self.color: Color = Color.BLACK
        self.alpha = 1.0
        self.position: tuple[float, float] = (0.0, 0.0)
        self.text_offset: tuple[float, float] = (0.0, 0.0)
        self.menu_screen: Any = None
        self.text_align = TextAlign.LEFT

    def update(self, game_time: Any) -> None:
        """Update the item; the base item has nothing to update."""

    def draw(self, sprite_batch: Any) -> None:
        """Draw the item's text, if it has a font and text."""
        if self.font is None or not self.text:
            return
        position = (
            self.position[0] + self.text_offset[0],
            self.position[1] + self.text_offset[1],
        )
        sprite_batch.draw_string(
            self.font, self.text, position, self.color * self.alpha, self.text_align
        )

    def select(self, menu_screen: Any) -> None:
        """Run the on_select callback, if one is set."""
        if self.on_select is not None:
            self.on_select()