"""A single readiness event paired with a token."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .interest import Interest


@dataclass(frozen=True)
class Event:
    """Readiness state reported for the source registered under ``token``."""

    token: int
    readable: bool = False
    writable: bool = False
    error: bool = False
    read_closed: bool = False
    write_closed: bool = False
    priority: bool = False
    aio: bool = False
    lio: bool = False

    @classmethod
    def from_interest(cls, token: int, interest: Interest) -> Event:
        """Build an event whose readiness matches the kinds in ``interest``."""
        return cls(
            token=token,
            readable=interest.is_readable(),
            writable=interest.is_writable(),
            aio=interest.is_aio(),
            lio=interest.is_lio(),
        )

    def _flag_names(self) -> list[str]:
        return [f.name for f in fields(self) if f.name != "token" and getattr(self, f.name)]

    def describe(self, alternate: bool = False) -> str:
        """Render the event; ``alternate`` gives a multi-line form with details."""
        items = [(f.name, repr(getattr(self, f.name))) for f in fields(self)]
        if not alternate:
            return "Event(" + ", ".join(f"{name}={value}" for name, value in items) + ")"
        items.append(("details", repr(" | ".join(self._flag_names()))))
        body = "".join(f"    {name}={value},\n" for name, value in items)
        return "Event(\n" + body + ")"

    def __repr__(self) -> str:
        return self.describe()