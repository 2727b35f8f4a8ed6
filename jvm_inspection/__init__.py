"""Classification of discovered Java installation homes.

Public API:
    from_success(java_home, language_version, vendor, implementation_name)
        -> ValidInstallationMetadata
    from_failure(java_home, error_message) -> InvalidInstallationMetadata
"""

from jvm_inspection.metadata import (
    InvalidInstallationMetadata,
    JvmInstallationMetadata,
    ValidInstallationMetadata,
    from_failure,
    from_success,
)
from jvm_inspection.types import (
    JavaInstallationCapability,
    JavaVersion,
    UnsupportedVariantError,
)
from jvm_inspection.vendor import JvmVendor, KnownJvmVendor

__all__ = [
    "from_success",
    "from_failure",
    "JvmInstallationMetadata",
    "ValidInstallationMetadata",
    "InvalidInstallationMetadata",
    "JavaInstallationCapability",
    "JavaVersion",
    "UnsupportedVariantError",
    "JvmVendor",
    "KnownJvmVendor",
]
