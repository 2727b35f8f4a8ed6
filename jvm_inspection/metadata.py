"""Installation metadata: a two-variant result of probing a Java home.

Construct with from_success() or from_failure(). Both variants answer
``java_home``, ``is_valid``, ``display_name`` and ``to_dict()``. Every
other accessor belongs to one variant only; calling it on the other
raises UnsupportedVariantError.

Valid instances probe the filesystem for a compiler on the first
``capabilities`` access and reuse that result for their lifetime.
"""

import logging
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import NoReturn, Optional, Union

from jvm_inspection.capabilities import Memoized, gather_capabilities
from jvm_inspection.display import format_display_name
from jvm_inspection.types import (
    JavaInstallationCapability,
    JavaVersion,
    UnsupportedVariantError,
)
from jvm_inspection.vendor import JvmVendor

logger = logging.getLogger(__name__)

PathType = Union[str, PathLike]


class JvmInstallationMetadata(ABC):
    """Common surface of both variants."""

    def __init__(self, java_home: PathType):
        self._java_home = Path(java_home)

    @property
    def java_home(self) -> Path:
        return self._java_home

    @property
    @abstractmethod
    def is_valid(self) -> bool: ...

    @property
    @abstractmethod
    def display_name(self) -> str: ...

    @property
    @abstractmethod
    def language_version(self) -> JavaVersion: ...

    @property
    @abstractmethod
    def vendor(self) -> JvmVendor: ...

    @property
    @abstractmethod
    def capabilities(self) -> frozenset[JavaInstallationCapability]: ...

    @property
    @abstractmethod
    def error_message(self) -> str: ...

    @abstractmethod
    def to_dict(self) -> dict: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._java_home)!r})"


class ValidInstallationMetadata(JvmInstallationMetadata):
    def __init__(
        self,
        java_home: PathType,
        language_version: JavaVersion,
        vendor: Optional[str],
        implementation_name: Optional[str],
    ):
        super().__init__(java_home)
        self._language_version = language_version
        self._raw_vendor = vendor or ""
        self._implementation_name = implementation_name or ""
        self._capabilities = Memoized(lambda: gather_capabilities(self._java_home))

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def language_version(self) -> JavaVersion:
        return self._language_version

    @property
    def vendor(self) -> JvmVendor:
        return JvmVendor.from_string(self._raw_vendor)

    @property
    def implementation_name(self) -> str:
        return self._implementation_name

    @property
    def capabilities(self) -> frozenset[JavaInstallationCapability]:
        return self._capabilities.get()

    @property
    def display_name(self) -> str:
        return format_display_name(
            self.vendor,
            self._implementation_name,
            self._language_version,
            self.capabilities,
        )

    @property
    def error_message(self) -> NoReturn:
        raise UnsupportedVariantError(
            "error_message", self._java_home, "installation is valid"
        )

    def to_dict(self) -> dict:
        return {
            "valid": True,
            "java_home": str(self._java_home),
            "display_name": self.display_name,
            "language_version": str(self._language_version),
            "vendor": self.vendor.known_vendor.name,
            "raw_vendor": self._raw_vendor,
            "implementation_name": self._implementation_name,
            "capabilities": sorted(c.name for c in self.capabilities),
        }


class InvalidInstallationMetadata(JvmInstallationMetadata):
    def __init__(self, java_home: PathType, error_message: str):
        super().__init__(java_home)
        self._error_message = error_message

    def _unsupported(self, accessor: str) -> UnsupportedVariantError:
        return UnsupportedVariantError(
            accessor,
            self._java_home,
            f"Installation is not valid. Original error message: {self._error_message}",
        )

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def display_name(self) -> str:
        return f"Invalid installation: {self._error_message}"

    @property
    def language_version(self) -> NoReturn:
        raise self._unsupported("language_version")

    @property
    def vendor(self) -> NoReturn:
        raise self._unsupported("vendor")

    @property
    def capabilities(self) -> NoReturn:
        raise self._unsupported("capabilities")

    def to_dict(self) -> dict:
        return {
            "valid": False,
            "java_home": str(self._java_home),
            "display_name": self.display_name,
            "error_message": self._error_message,
        }


def from_success(
    java_home: PathType,
    language_version: JavaVersion,
    vendor: Optional[str],
    implementation_name: Optional[str],
) -> ValidInstallationMetadata:
    """Build metadata for a successfully probed installation."""
    return ValidInstallationMetadata(java_home, language_version, vendor, implementation_name)


def from_failure(java_home: PathType, error_message: str) -> InvalidInstallationMetadata:
    """Build metadata for an installation that could not be probed."""
    logger.debug("Invalid installation at %s: %s", java_home, error_message)
    return InvalidInstallationMetadata(java_home, error_message)
