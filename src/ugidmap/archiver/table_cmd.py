from ._common import with_mapping
from ..constants import *  # NOQA
from ..helpers import json_print
from ..helpers.argparsing import ArgumentParser

from ..logger import create_logger

logger = create_logger()


class TableMixIn:
    @with_mapping
    def do_table(self, args, mapping):
        """Show the user and group tables of a freshly seeded mapping"""
        tables = mapping.snapshot()
        if args.json:
            json_print(
                {
                    USER: [dict(name=name, id=uid) for uid, name in sorted(tables["uids"].items())],
                    GROUP: [dict(name=name, id=gid) for gid, name in sorted(tables["gids"].items())],
                    "stats": mapping.stats(),
                }
            )
            return
        for kind, key in (USER, "uids"), (GROUP, "gids"):
            for id, name in sorted(tables[key].items()):
                print(f"{kind} {id} {name}")

    def build_parser_table(self, subcommands):
        subparser = ArgumentParser(prog=f"{self.prog} table", description=self.do_table.__doc__)
        subparser.add_argument("--json", dest="json", action="store_true", help="format output as JSON")
        subcommands.add_subcommand("table", subparser, help="show the seeded user and group tables")
