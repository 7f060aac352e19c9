"""Centralized package information for credresolver."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "get_package_info"]

PACKAGE_NAME = "credresolver"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    PACKAGE_VERSION = "unknown"


def get_package_info() -> tuple[str, str]:
    """Get the package name and version as a tuple.

    Returns:
        A tuple of (package_name, package_version)
    """
    return PACKAGE_NAME, PACKAGE_VERSION
