"""Shared types for the installation metadata module.

JavaVersion is handed in already parsed by the discovery layer; this
package never parses version strings.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class JavaVersion:
    """Structured language version of an installation (e.g. 17.0.2)."""

    major: int
    minor: int = 0
    patch: int = 0

    @property
    def major_version(self) -> str:
        return str(self.major)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class JavaInstallationCapability(Enum):
    JAVA_COMPILER = "JAVA_COMPILER"


class UnsupportedVariantError(Exception):
    """Raised when an accessor is called on the wrong metadata variant.

    This is a contract violation by the caller, not a recoverable
    condition. Carries the accessor name and the installation home.
    """

    def __init__(self, accessor: str, java_home: Path, message: Optional[str] = None):
        self.accessor = accessor
        self.java_home = java_home
        detail = f": {message}" if message else ""
        super().__init__(f"'{accessor}' is not supported on this variant ({java_home}){detail}")
