"""Resource identifier used to route HTTP requests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Uri:
    """A request target; only the path takes part in comparison and hashing.

    The path is stored in lower case, so lookups are case-insensitive.
    """

    path: str = ""
    scheme: str = field(default="", compare=False)
    host: str = field(default="", compare=False)
    port: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", self.path.lower())

    def __str__(self) -> str:
        return self.path