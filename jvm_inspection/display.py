"""Display name formatting for valid installations.

Rules, in order:
  1. Vendor label: ORACLE builds whose implementation name mentions
     "OpenJDK" are labelled "OpenJDK"; everything else uses the vendor's
     display name.
  2. Installation type: " JRE" without a compiler. With a compiler,
     " JDK" unless the label already contains "jdk" (any case).
  3. "<label><type> <major>".
"""

from typing import AbstractSet, Optional

from jvm_inspection.types import JavaInstallationCapability, JavaVersion
from jvm_inspection.vendor import JvmVendor, KnownJvmVendor

OPENJDK = "OpenJDK"


def determine_vendor_name(vendor: JvmVendor, implementation_name: Optional[str]) -> str:
    if vendor.known_vendor is KnownJvmVendor.ORACLE:
        if implementation_name and OPENJDK in implementation_name:
            return OPENJDK
    return vendor.display_name


def determine_installation_type(
    vendor_name: str,
    capabilities: AbstractSet[JavaInstallationCapability],
) -> str:
    if JavaInstallationCapability.JAVA_COMPILER in capabilities:
        if "jdk" in vendor_name.lower():
            return ""
        return " JDK"
    return " JRE"


def format_display_name(
    vendor: JvmVendor,
    implementation_name: Optional[str],
    language_version: JavaVersion,
    capabilities: AbstractSet[JavaInstallationCapability],
) -> str:
    vendor_name = determine_vendor_name(vendor, implementation_name)
    installation_type = determine_installation_type(vendor_name, capabilities)
    return f"{vendor_name}{installation_type} {language_version.major_version}"
