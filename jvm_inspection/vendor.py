"""Vendor resolver for raw ``java.vendor`` strings.

Maps the free-text vendor reported by a runtime onto a closed set of
known vendors. Matching is a case-insensitive regex search, first match
wins, so more specific vendors are listed before broader ones
(IBM Semeru before IBM, Adoptium before AdoptOpenJDK).
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KnownJvmVendor(Enum):
    ADOPTIUM = ("adoptium", r"temurin|adoptium|eclipse foundation", "Eclipse Temurin")
    ADOPTOPENJDK = ("adoptopenjdk", r"aoj|adoptopenjdk", "AdoptOpenJDK")
    AMAZON = ("amazon", r"amazon|corretto", "Amazon Corretto")
    APPLE = ("apple", r"apple", "Apple")
    AZUL = ("azul systems", r"azul|zulu", "Azul Zulu")
    BELLSOFT = ("bellsoft", r"bellsoft|liberica", "BellSoft Liberica")
    GRAAL_VM = ("graalvm community", r"graal", "GraalVM Community")
    HEWLETT_PACKARD = ("hewlett-packard", r"hewlett|\bhp\b", "HP-UX")
    IBM_SEMERU = ("ibm_semeru", r"semeru", "IBM Semeru")
    IBM = ("ibm", r"\bibm\b|international business machines", "IBM")
    MICROSOFT = ("microsoft", r"microsoft", "Microsoft")
    ORACLE = ("oracle", r"oracle", "Oracle")
    SAP = ("sap se", r"\bsap\b|sapmachine", "SAP SapMachine")
    TENCENT = ("tencent", r"tencent|kona", "Tencent")
    UNKNOWN = ("unknown", None, "Unknown Vendor")

    def __init__(self, key: str, pattern: Optional[str], display_name: str):
        self.key = key
        self.display_name = display_name
        self._pattern = re.compile(pattern, re.IGNORECASE) if pattern else None

    def matches(self, raw_vendor: str) -> bool:
        return self._pattern is not None and self._pattern.search(raw_vendor) is not None

    @classmethod
    def parse(cls, raw_vendor: Optional[str]) -> "KnownJvmVendor":
        """Return the first vendor whose pattern matches, else UNKNOWN."""
        if not raw_vendor:
            return cls.UNKNOWN
        for vendor in cls:
            if vendor.matches(raw_vendor):
                return vendor
        return cls.UNKNOWN


@dataclass(frozen=True)
class JvmVendor:
    """A raw vendor string together with its known-vendor classification."""

    raw_vendor: str
    known_vendor: KnownJvmVendor

    @classmethod
    def from_string(cls, raw_vendor: Optional[str]) -> "JvmVendor":
        raw = raw_vendor or ""
        return cls(raw_vendor=raw, known_vendor=KnownJvmVendor.parse(raw))

    @property
    def display_name(self) -> str:
        # Unrecognised vendors are shown as reported; blank ones get the generic label.
        if self.known_vendor is KnownJvmVendor.UNKNOWN:
            return self.raw_vendor.strip() or self.known_vendor.display_name
        return self.known_vendor.display_name

    def __str__(self) -> str:
        return self.display_name
