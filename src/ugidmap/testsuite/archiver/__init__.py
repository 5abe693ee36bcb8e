import io
import sys

from ...archiver import Archiver
from ...helpers import Error
from ...logger import flush_logging
from .. import FakeDirectory

USERS = [(0, "root"), (1000, "alice")]
GROUPS = [(0, "root"), (100, "users")]


def exec_cmd(*args, directory=None):
    """run the ugidmap cli in-process, return (rc, output) with stdout and stderr combined"""
    if directory is None:
        directory = FakeDirectory(users=USERS, groups=GROUPS)
    stdout, stderr = sys.stdout, sys.stderr
    try:
        output = sys.stdout = sys.stderr = io.StringIO()
        archiver = Archiver(directory=directory)
        try:
            args = archiver.parse_args(list(args))
            # argparse parsing may raise SystemExit when the command line is bad or
            # actions that abort early (eg. --help) where given. Catch this and return
            # the error code as-if we invoked a ugidmap binary.
        except SystemExit as e:
            return e.code, output.getvalue()
        try:
            rc = archiver.run(args)
        except Error as e:
            rc = e.exit_code
            print(e.get_message())
        flush_logging()
        return rc, output.getvalue()
    finally:
        sys.stdout, sys.stderr = stdout, stderr
