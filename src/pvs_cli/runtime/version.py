"""The ``<major>.<minor>`` version value type and its format check."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidVersionFormat

VERSION_PATTERN = r"[0-9]+\.[0-9]+"

_VERSION_RE = re.compile(VERSION_PATTERN)


def validate_version_format(value: str) -> bool:
    """Return True if *value* is exactly ``<major>.<minor>``.

    No surrounding whitespace, trailing newline, patch component or prefix
    is tolerated (``"8.2.1"``, ``"8"``, ``"8.2 "`` and ``"v8.2"`` are all
    rejected).
    """
    return _VERSION_RE.fullmatch(value) is not None


@dataclass(frozen=True, order=True)
class Version:
    """A PHP ``major.minor`` version.

    Ordering is numeric on ``(major, minor)``, so ``8.10`` sorts after ``8.9``.
    """

    major: int
    minor: int

    @classmethod
    def parse(cls, value: str, origin: str | None = None) -> Version:
        """Parse *value* into a Version.

        Args:
            value: Candidate string, e.g. ``"8.2"``
            origin: Label used in the error message (e.g. an env var name)

        Returns:
            The parsed Version.

        Raises:
            InvalidVersionFormat: If *value* fails ``validate_version_format``.
        """
        if not validate_version_format(value):
            raise InvalidVersionFormat(value, origin=origin)
        major, minor = value.split(".")
        return cls(int(major), int(minor))

    @property
    def concatenated(self) -> str:
        """Digits without separator, as in ``php82``."""
        return f"{self.major}{self.minor}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"
