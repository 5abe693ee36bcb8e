import os

from ..constants import *  # NOQA


modern_ec = os.environ.get("UGIDMAP_EXIT_CODES", "legacy") == "modern"


class ErrorBase(Exception):
    """ErrorBase: {}"""
    # Error base class

    # If we raise such an Error and it is only caught by the uppermost
    # exception handler (that exits shortly after with the given exit_code),
    # it is always a (fatal and abrupt) error, never just a warning.
    exit_mcode = EXIT_ERROR  # modern, more specific exit code (defaults to EXIT_ERROR)

    # show a traceback?
    traceback = False

    def __init__(self, *args):
        super().__init__(*args)
        self.args = args

    def get_message(self):
        return type(self).__doc__.format(*self.args)

    __str__ = get_message

    @property
    def exit_code(self):
        # legacy: ugidmap always uses rc 2 (EXIT_ERROR) for all errors.
        # modern: users can opt in to more specific return codes, using UGIDMAP_EXIT_CODES:
        return self.exit_mcode if modern_ec else EXIT_ERROR


class Error(ErrorBase):
    """Error: {}"""


class CommandError(Error):
    """Command Error: {}"""
    exit_mcode = 4


class SaltFileError(Error):
    """Could not read salt file {}: {}"""
    exit_mcode = 5
