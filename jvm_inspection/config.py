import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_MODEL_CONFIG = SettingsConfigDict(
    env_prefix="JVM_INSPECTION_",
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class ProbeSettings(BaseSettings):
    """Settings read by the capability prober.

    os_family overrides host OS detection when computing executable
    names. Leave blank to detect the host.

    Accepted os_family values
    ─────────────────────────
    • windows   executables carry a ``.exe`` suffix
    • anything else (linux, macos, ...)   no suffix

    Only this field is validated at probe time, so a malformed value for
    any other ``JVM_INSPECTION_*`` variable cannot reach the prober.
    """

    model_config = _MODEL_CONFIG

    os_family: str = ""

    @field_validator("os_family", mode="before")
    @classmethod
    def normalise_os_family(cls, v: str) -> str:
        return (v or "").strip().lower()


class Settings(ProbeSettings):
    """Package settings loaded from ``JVM_INSPECTION_*`` environment variables."""

    model_config = _MODEL_CONFIG

    # Logging: console renderer when true, JSON otherwise.
    debug: bool = True


def get_settings() -> Settings:
    return Settings()


def get_os_family_override() -> str:
    """Return the configured os_family, or "" when unset or unreadable."""
    try:
        return ProbeSettings().os_family
    except ValidationError as exc:
        logger.debug("Ignoring unreadable os_family setting, detecting host: %s", exc)
        return ""
