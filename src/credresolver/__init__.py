"""credresolver - resolve configuration references to systemd credentials.

Selectors of the form ``systemdcredential:NAME`` are resolved to the content
of ``$CREDENTIALS_DIRECTORY/NAME``. See ``credresolver.config``.
"""

from .version import PACKAGE_NAME, PACKAGE_VERSION, get_package_info

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "get_package_info"]
