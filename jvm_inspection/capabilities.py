"""Capability prober for installation homes.

An installation is a full development kit when ``<java_home>/bin`` holds
the compiler executable. The check is a single existence test; any
OSError raised while checking counts as "absent".
"""

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar

from jvm_inspection.config import get_os_family_override
from jvm_inspection.types import JavaInstallationCapability

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMPILER_EXECUTABLE = "javac"

_WINDOWS = "windows"


def _host_os_family() -> str:
    return _WINDOWS if os.name == "nt" else os.name


def executable_name(base_name: str, os_family: Optional[str] = None) -> str:
    """Return the platform executable name for base_name.

    os_family defaults to the configured override, then the host OS.
    """
    if not os_family:
        os_family = get_os_family_override() or _host_os_family()
    if os_family.strip().lower() == _WINDOWS:
        return f"{base_name}.exe"
    return base_name


def compiler_path(java_home: Path, os_family: Optional[str] = None) -> Path:
    return java_home / "bin" / executable_name(COMPILER_EXECUTABLE, os_family)


def gather_capabilities(
    java_home: Path,
    os_family: Optional[str] = None,
) -> frozenset[JavaInstallationCapability]:
    """Probe java_home and return its capability set."""
    javac = compiler_path(java_home, os_family)
    try:
        present = javac.exists()
    except OSError as exc:
        logger.debug("Could not check %s, treating compiler as absent: %s", javac, exc)
        present = False

    logger.debug("Compiler probe %s: %s", javac, "found" if present else "absent")
    if present:
        return frozenset({JavaInstallationCapability.JAVA_COMPILER})
    return frozenset()


class Memoized(Generic[T]):
    """Compute-once cell, safe under concurrent first access.

    The supplier runs at most once; every caller gets the same object.
    """

    def __init__(self, supplier: Callable[[], T]):
        self._supplier = supplier
        self._lock = threading.Lock()
        self._computed = False
        self._value: Optional[T] = None

    @property
    def is_computed(self) -> bool:
        return self._computed

    def get(self) -> T:
        if not self._computed:
            with self._lock:
                if not self._computed:
                    self._value = self._supplier()
                    self._computed = True
        return self._value  # type: ignore[return-value]
