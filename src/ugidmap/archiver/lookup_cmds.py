from ._common import with_mapping
from ..constants import *  # NOQA
from ..helpers import get_salt, json_print, parse_id
from ..helpers.argparsing import ArgumentParser
from ..mapping import gen_guid

from ..logger import create_logger

logger = create_logger()


class LookupMixIn:
    def _print_results(self, args, kind, results):
        if args.json:
            json_print({"kind": kind, "results": [dict(name=name, id=id) for name, id in results]})
        else:
            for name, id in results:
                print(f"{name} {id}")

    @with_mapping
    def do_user(self, args, mapping):
        """Resolve user names to uids"""
        self._print_results(args, USER, [(name, mapping.user2uid(name)) for name in map(str, args.names)])

    @with_mapping
    def do_group(self, args, mapping):
        """Resolve group names to gids"""
        self._print_results(args, GROUP, [(name, mapping.group2gid(name)) for name in map(str, args.names)])

    @with_mapping
    def do_uid(self, args, mapping):
        """Resolve uids to user names"""
        uids = [parse_id(value) for value in args.ids]
        self._print_results(args, USER, [(mapping.uid2user(uid), uid) for uid in uids])

    @with_mapping
    def do_gid(self, args, mapping):
        """Resolve gids to group names"""
        gids = [parse_id(value) for value in args.ids]
        self._print_results(args, GROUP, [(mapping.gid2group(gid), gid) for gid in gids])

    def do_guid(self, args):
        """Compute synthetic ids, without asking the host"""
        salt = get_salt(args.salt)
        self._print_results(args, "synthetic", [(name, gen_guid(salt, name)) for name in map(str, args.names)])

    def build_parser_lookups(self, subcommands):
        for cmd, func, help in (
            ("user", self.do_user, "resolve user names to uids"),
            ("group", self.do_group, "resolve group names to gids"),
            ("guid", self.do_guid, "compute synthetic ids for names (no host lookup)"),
        ):
            subparser = ArgumentParser(prog=f"{self.prog} {cmd}", description=func.__doc__)
            subparser.add_argument("names", metavar="NAME", nargs="+", help="names to resolve")
            subparser.add_argument("--json", dest="json", action="store_true", help="format output as JSON")
            subcommands.add_subcommand(cmd, subparser, help=help)

        for cmd, func, help in (
            ("uid", self.do_uid, "resolve uids to user names"),
            ("gid", self.do_gid, "resolve gids to group names"),
        ):
            subparser = ArgumentParser(prog=f"{self.prog} {cmd}", description=func.__doc__)
            subparser.add_argument("ids", metavar="ID", nargs="+", help="numeric ids to resolve")
            subparser.add_argument("--json", dest="json", action="store_true", help="format output as JSON")
            subcommands.add_subcommand(cmd, subparser, help=help)
