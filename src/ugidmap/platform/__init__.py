"""
Platform-specific APIs.

Public APIs are documented in platform.base.
"""

from ..platformflags import is_win32

from .base import HostDirectory, pwent

if not is_win32:
    from .posix_ug import PosixDirectory as Directory
else:
    # no account database we could query, everything is synthesized
    Directory = HostDirectory


def get_directory():
    """Return the host identity directory for the running platform."""
    return Directory()
