"""Context object for passing selections between cascade stages."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class SelectionContext:
    """Selections made so far. Each field is bound once and never changed."""

    profile: str | None = None
    cluster: str | None = None
    service: str | None = None
    task: str | None = None
    container: str | None = None
    command: str | None = None

    def bind(self, **values: str) -> SelectionContext:
        """Return a new context with ``values`` bound."""
        for name in values:
            if getattr(self, name) is not None:
                raise ValueError(f"'{name}' is already bound to {getattr(self, name)!r}")
        return replace(self, **values)

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))
