"""
This package contains various small helper/utility functions that did not fit better elsewhere.
"""

from .errors import *  # NOQA
from .fs import *  # NOQA
from .misc import *  # NOQA
