import functools
from typing import Optional

from ..helpers import get_salt
from ..mapping import IdMapping

from ..logger import create_logger

logger = create_logger(__name__)


def with_mapping(method):
    """
    Method decorator for subcommand-handling methods: do_XYZ(self, args, mapping)

    Builds the IdMapping from the common options (--salt, --no-seed) and the
    host directory of the Archiver.
    """

    @functools.wraps(method)
    def wrapper(self, args, **kwargs):
        salt = get_salt(args.salt)
        mapping = IdMapping(salt, directory=self.directory, seed=not args.no_seed)
        if args.no_seed:
            logger.debug("not seeding the mapping from the host accounts")
        return method(self, args, mapping=mapping, **kwargs)

    return wrapper


def define_common_options(parser):
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["critical", "error", "warning", "info", "debug"],
        default="warning",
        help="work on log level LOG_LEVEL (default: warning)",
    )
    parser.add_argument(
        "--log-json",
        dest="log_json",
        action="store_true",
        help="Output one JSON object per log line instead of formatted text.",
    )
    parser.add_argument(
        "--salt",
        metavar="SALT",
        dest="salt",
        type=Optional[str],
        default=None,
        help="salt for synthetic ids (default: UGIDMAP_SALT env var or the salt file in the config dir)",
    )
    parser.add_argument(
        "--no-seed",
        dest="no_seed",
        action="store_true",
        help="do not load all host accounts into the mapping before resolving",
    )
