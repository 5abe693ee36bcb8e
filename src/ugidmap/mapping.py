"""
user / group name <-> id mapping

An IdMapping answers "which id has this name?" and "which name has this id?"
for users and groups. It asks the host identity directory first and falls
back to synthesized values if the host does not know the account:

- unknown names get a synthetic id, see gen_guid().
- unknown ids get their decimal representation as name.

Every answer is remembered (in both directions), so the same question always
gets the same answer for the lifetime of the mapping and the directory is
asked at most once per distinct name / id. Entries are only ever added or
overwritten, never removed.
"""

import hashlib
import struct
import threading

from .constants import *  # NOQA
from .logger import create_logger
from .platform import get_directory, pwent

logger = create_logger()

# md5 digest, split into two little endian 64bit halves
digest_struct = struct.Struct("<QQ")


def gen_guid(salt, name):
    """Return the synthetic 32bit id for *name*.

    The id is derived from md5(salt + name + salt): the two 64bit little endian
    halves of the digest are xor-ed and the low 32 bits of that are the id.

    This is a pure function: same salt and name always give the same id, on
    every platform and in every process. ids are stored as file ownership, so
    changing anything here breaks existing data.
    """
    data = (salt + name + salt).encode("utf-8", "surrogateescape")
    lo, hi = digest_struct.unpack(hashlib.md5(data, usedforsecurity=False).digest())
    return (lo ^ hi) & GUID_MASK


def truncate_name(name):
    return name[:MAX_NAME_LENGTH]


class IdMapping:
    """
    Bidirectional, thread-safe user / group name <-> id cache.

    *salt* is mixed into synthetic ids, use the same salt to get the same ids again.
    *directory* is the host identity directory (see platform.base.HostDirectory),
    it defaults to the one of the running platform.
    If *seed* is True, all accounts the directory can enumerate are loaded at once.

    All lookups and update() are serialized by one lock, which is also held
    while the directory is queried. Lookups never raise.
    """

    def __init__(self, salt, directory=None, seed=True):
        if not isinstance(salt, str):
            raise TypeError(f"salt must be a str, not {type(salt).__name__}")
        self.salt = salt
        self.directory = get_directory() if directory is None else directory
        self.lock = threading.Lock()
        # user name -> uid, uid -> user name
        self.usernames = {}
        self.uids = {}
        # group name -> gid, gid -> group name
        self.groupnames = {}
        self.gids = {}
        if seed:
            self.update(self._enumerate(self.directory.users), self._enumerate(self.directory.groups))

    def _enumerate(self, enumeration):
        try:
            return list(enumeration())
        except Exception as err:
            logger.warning("Could not enumerate host accounts (%s): %r", enumeration.__name__, err)
            return []

    def _query(self, lookup, key):
        # a failing directory is the same as a directory not knowing the key
        try:
            return lookup(key)
        except Exception as err:
            logger.debug("%s(%r) failed with %r, treating it as not found", lookup.__name__, key, err)
            return None

    def _name2id(self, names, ids, lookup, name):
        with self.lock:
            id = names.get(name)
            if id is not None:
                return id
            entry = self._query(lookup, name)
            if entry is not None:
                id = entry.id
            else:
                id = gen_guid(self.salt, name)
                logger.debug("%s: unknown to the host, using synthetic id %d", name, id)
            names[name] = id
            # reverse lookups must give names that fit the fixed-width consumers,
            # the short name resolves to the same id
            short = truncate_name(name)
            names[short] = id
            ids[id] = short
            return id

    def _id2name(self, names, ids, lookup, id):
        with self.lock:
            name = ids.get(id)
            if name is not None:
                return name
            entry = self._query(lookup, id)
            if entry is not None:
                name = entry.name
            else:
                name = str(id)
                logger.debug("%d: unknown to the host, using it as name", id)
            if len(name) > MAX_NAME_LENGTH:
                logger.debug("%d: truncating name %r to %d characters", id, name, MAX_NAME_LENGTH)
                name = truncate_name(name)
            names[name] = id
            ids[id] = name
            return name

    def user2uid(self, name):
        """Return the uid of user *name*, synthesize one if the host has no such user."""
        return self._name2id(self.usernames, self.uids, self.directory.user_by_name, name)

    def group2gid(self, name):
        """Return the gid of group *name*, synthesize one if the host has no such group."""
        return self._name2id(self.groupnames, self.gids, self.directory.group_by_name, name)

    def uid2user(self, uid):
        """Return the user name of *uid*, str(uid) if the host has no such user."""
        return self._id2name(self.usernames, self.uids, self.directory.user_by_id, uid)

    def gid2group(self, gid):
        """Return the group name of *gid*, str(gid) if the host has no such group."""
        return self._id2name(self.groupnames, self.gids, self.directory.group_by_id, gid)

    def update(self, users=(), groups=()):
        """
        Add (id, name) pairs for users and groups, e.g. from a fresh enumeration
        of the host accounts. Existing entries with the same name or id are overwritten.
        """
        users = [pwent(*entry) for entry in users]
        groups = [pwent(*entry) for entry in groups]
        with self.lock:
            for uid, name in users:
                self.usernames[name] = uid
                self.uids[uid] = name
            for gid, name in groups:
                self.groupnames[name] = gid
                self.gids[gid] = name
        logger.debug("mapping updated with %d users and %d groups", len(users), len(groups))

    def stats(self):
        """Return the sizes of the four tables."""
        with self.lock:
            return dict(
                usernames=len(self.usernames), uids=len(self.uids), groupnames=len(self.groupnames), gids=len(self.gids)
            )

    def snapshot(self):
        """Return copies of the four tables."""
        with self.lock:
            return dict(
                usernames=dict(self.usernames),
                uids=dict(self.uids),
                groupnames=dict(self.groupnames),
                gids=dict(self.gids),
            )
