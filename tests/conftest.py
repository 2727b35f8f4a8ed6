"""Shared fixtures for the jvm_inspection test suite.

Installation homes are built under tmp_path; no real JDKs are needed.
OS detection is pinned to linux so bin/javac is the compiler name on
every host unless a test overrides it.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _pin_os_family(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JVM_INSPECTION_OS_FAMILY", "linux")
    monkeypatch.delenv("JVM_INSPECTION_DEBUG", raising=False)


def make_home(root: Path, *, javac: str | None = "javac") -> Path:
    """Create a fake installation home, optionally with bin/<javac>."""
    home = root / "jdk"
    (home / "bin").mkdir(parents=True)
    (home / "bin" / "java").write_text("", encoding="utf-8")
    if javac:
        (home / "bin" / javac).write_text("", encoding="utf-8")
    return home


@pytest.fixture
def jdk_home(tmp_path: Path) -> Path:
    return make_home(tmp_path)


@pytest.fixture
def jre_home(tmp_path: Path) -> Path:
    return make_home(tmp_path, javac=None)
