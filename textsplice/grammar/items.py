"""Shared base for ordered sentence tokens."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class SentenceItem:
    """Ordered sentence token followed by a run of whitespace.

    Attributes:
        trail_space_count: Number of whitespace characters directly after the token.
    """

    trail_space_count: int = field(default=0, kw_only=True)

    def render(self) -> str:
        """Return token text followed by its trailing spaces."""

        return f"{self}{' ' * self.trail_space_count}"
