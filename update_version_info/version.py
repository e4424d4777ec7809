"""Four-part version number stamped into build artifacts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VersionInfo:
    major: int
    minor: int
    build: int
    revision: int

    @property
    def full(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"

    @property
    def short(self) -> str:
        """Marketing version used by Android versionName and CFBundleShortVersionString."""
        return f"{self.major}.{self.minor}"

    @property
    def bundle_version(self) -> str:
        return f"{self.build}.{self.revision}"

    def __str__(self) -> str:
        return self.full
