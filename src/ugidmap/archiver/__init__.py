# ugidmap cli interface / toplevel archiver code

import sys
import traceback

try:
    import faulthandler
    import logging
    import os
    import platform

    from ..logger import create_logger, setup_logging, flush_logging

    logger = create_logger()

    from .. import __version__
    from ..constants import *  # NOQA
    from ..helpers import Error, CommandError, modern_ec
    from ..helpers import ErrorIgnoringTextIOWrapper
    from ..helpers.argparsing import ArgumentParser, ArgumentTypeError, flatten_namespace
except BaseException:
    # an unhandled exception in the try-block would cause the cli command to exit with rc 1 due to python's
    # default behavior. as ugidmap defines rc 1 as WARNING, this would be a mismatch, because a crash should
    # be an ERROR (rc 2).
    traceback.print_exc()
    sys.exit(2)  # == EXIT_ERROR

assert EXIT_ERROR == 2, "EXIT_ERROR is not 2, as expected - fix assert AND exception handler right above this line."


def get_func(archiver, args):
    subcommand = getattr(args, "subcommand", None)
    func = getattr(archiver, f"do_{subcommand}", None) if subcommand else None
    if func is None:
        raise Exception("expected a subcommand")
    return func


from .lookup_cmds import LookupMixIn
from .table_cmd import TableMixIn


class Archiver(LookupMixIn, TableMixIn):
    def __init__(self, prog=None, directory=None):
        self.prog = prog or "ugidmap"
        # None: the host identity directory of the running platform
        self.directory = directory

    def build_parser(self):
        from ._common import define_common_options

        parser = ArgumentParser(prog=self.prog, description="ugidmap - user / group name <-> id mapping")
        parser.add_argument(
            "-V", "--version", action="version", version="%(prog)s " + __version__, help="show version number and exit"
        )
        define_common_options(parser)
        subcommands = parser.add_subcommands(dest="subcommand")
        self.build_parser_lookups(subcommands)
        self.build_parser_table(subcommands)
        return parser

    def parse_args(self, args=None):
        parser = self.build_parser()
        args = parser.parse_args(args or ["-h"])
        return flatten_namespace(args)

    def run(self, args):
        func = get_func(self, args)
        # do not use loggers before this!
        setup_logging(level=args.log_level, log_json=args.log_json)
        logger.debug("ugidmap %s, running %s", __version__, func.__name__)
        rc = func(args)
        assert rc is None
        return EXIT_SUCCESS


def sysinfo():
    python_implementation = platform.python_implementation()
    python_version = platform.python_version()
    return f"Platform: {' '.join(platform.uname())}\nugidmap: {__version__}  Python: {python_implementation} {python_version}\n"


def format_tb(exc):
    qualname = type(exc).__qualname__
    result = f"""
Error:

{qualname}: {exc}

If reporting bugs, please include the following:

{traceback.format_exc()}
{sysinfo()}
"""
    return result


def main():  # pragma: no cover
    # Make sure stdout and stderr have errors='replace' to avoid unicode
    # issues when print()-ing names that came undecodable from the host
    sys.stdout = ErrorIgnoringTextIOWrapper(sys.stdout.buffer, sys.stdout.encoding, "replace", line_buffering=True)
    sys.stderr = ErrorIgnoringTextIOWrapper(sys.stderr.buffer, sys.stderr.encoding, "replace", line_buffering=True)

    # Register fault handler for SIGSEGV, SIGFPE, SIGABRT, SIGBUS and SIGILL.
    faulthandler.enable()
    archiver = Archiver(prog=os.path.basename(sys.argv[0]) or None)
    msg = msgid = tb = None
    tb_log_level = logging.ERROR
    try:
        args = archiver.parse_args(sys.argv[1:])
    except Error as e:
        # we might not have logging setup yet, so get out quickly
        print(e.get_message(), file=sys.stderr)
        sys.exit(e.exit_code)
    except ArgumentTypeError as e:
        # we might not have logging setup yet, so get out quickly
        print(str(e), file=sys.stderr)
        sys.exit(CommandError.exit_mcode if modern_ec else EXIT_ERROR)
    try:
        exit_code = archiver.run(args)
    except Error as e:
        msg = e.get_message()
        msgid = type(e).__qualname__
        tb_log_level = logging.ERROR if e.traceback else logging.DEBUG
        tb = format_tb(e)
        exit_code = e.exit_code
    except Exception as e:
        msg = "Local Exception"
        msgid = "Exception"
        tb_log_level = logging.ERROR
        tb = format_tb(e)
        exit_code = EXIT_ERROR
    except KeyboardInterrupt as e:
        msg = "Keyboard interrupt"
        tb_log_level = logging.DEBUG
        tb = format_tb(e)
        exit_code = EXIT_SIGNAL_BASE + 2
    if msg:
        logger.error(msg, msgid=msgid)
    if tb:
        logger.log(tb_log_level, tb)
    flush_logging()
    sys.exit(exit_code)
