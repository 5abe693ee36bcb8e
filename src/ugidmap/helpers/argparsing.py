"""
ugidmap argument-parsing layer
==============================

All imports of ``ArgumentParser``, ``Namespace``, etc. come
from this module.  It is the single seam between ugidmap and the underlying
parser library (jsonargparse).

Parser hierarchy
----------------
The command line has two levels::

    ugidmap [common-opts] <command> [command-opts] [args]

    e.g.  ugidmap --salt s3cr3t user alice bob
          ugidmap --log-level debug uid 1000 --json

jsonargparse stores each subcommand's parsed values in a nested
``Namespace`` object::

    Namespace(
        log_level = "debug",     # top-level
        subcommand = "uid",
        uid = Namespace(
            ids = ["1000"],
            json = True,
        )
    )

After ``parser.parse_args()`` returns, ``flatten_namespace()`` collapses
this tree into a single ``Namespace`` that the command implementations expect.
If a key exists on both levels, the subcommand value wins.
"""

from typing import Any

# here are the only imports from argparse and jsonargparse,
# all other imports of these names import them from here:
from argparse import ArgumentTypeError  # noqa: F401
from jsonargparse import ArgumentParser as _ArgumentParser  # we subclass that to add custom behavior
from jsonargparse import Namespace  # noqa: F401


class ArgumentParser(_ArgumentParser):
    # ugidmap never wants to read arguments from the environment implicitly,
    # the few env vars it supports are documented and read explicitly.
    def __init__(self, *args, default_env=False, **kwargs):
        super().__init__(*args, default_env=default_env, **kwargs)


def flatten_namespace(ns: Any) -> Namespace:
    """
    Flattens the nested namespace jsonargparse produces for subcommands into a
    single-level namespace, inner (subcommand) values take precedence over outer ones.
    """
    flat = Namespace()
    for key, value in vars(ns).items():
        if not isinstance(value, Namespace):
            setattr(flat, key, value)
    # only the namespace of the selected subcommand is merged, others may hold defaults
    subcommand = getattr(ns, "subcommand", None)
    if subcommand:
        for key, value in vars(getattr(ns, subcommand)).items():
            setattr(flat, key, value)
    return flat
