"""Base class for managed resources and text parsing helpers for resource files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

_WHITESPACE = " \t"


def split(line: str, delimiter: str) -> list[str]:
    """Split a line on a delimiter; a trailing empty field is dropped."""
    if not line:
        return []
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def trim_line(line: str) -> str:
    """Remove spaces and tabs from both ends of a line.

    A line made only of spaces and tabs is returned unchanged.
    """
    if not line or not line.strip(_WHITESPACE):
        return line
    return line.strip(_WHITESPACE)


def strip_comment(line: str) -> str:
    """Remove a // comment from a line and trim what is left.

    A line without a comment is returned unchanged.
    """
    if not line:
        return line
    position = line.find("//")
    if position == -1:
        return line
    return trim_line(line[:position])


class Resource(ABC):
    """Base class for every resource type managed by a resource manager."""

    def __init__(self) -> None:
        self.resource_id: int = 0
        self.resource_manager: Any = None

    @abstractmethod
    def load(self, path: str, manager: Any) -> None:
        """Load the resource from path; raise OSError or ValueError on failure."""

    @abstractmethod
    def is_cloneable(self) -> bool:
        """Return True if each user should get its own copy of the resource."""

    def clone(self) -> Resource:
        """Return a copy of the resource, or the resource itself if it is shared."""
        return self