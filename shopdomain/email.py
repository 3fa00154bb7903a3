"""E-mail address value object."""

from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


@dataclass(frozen=True)
class Email:
    """A validated, lower-cased e-mail address. The default instance is empty."""

    value: str = ""

    @classmethod
    def parse(cls, raw: str) -> Email:
        """Trim, validate and lower-case an address; raise ValueError if invalid."""
        trimmed = raw.strip()
        if not trimmed:
            raise ValueError("email cannot be empty")
        if not _EMAIL_PATTERN.fullmatch(trimmed):
            raise ValueError(f"invalid email format: {trimmed}")
        return cls(trimmed.lower())

    def __str__(self) -> str:
        return self.value

    def is_empty(self) -> bool:
        return self.value == ""

    def _parts(self) -> list[str]:
        return self.value.split("@")

    def domain(self) -> str:
        """The part after the '@', or an empty string if there is none."""
        parts = self._parts()
        return parts[1] if len(parts) == 2 else ""

    def local_part(self) -> str:
        """The part before the '@', or an empty string if there is none."""
        parts = self._parts()
        return parts[0] if len(parts) == 2 else ""