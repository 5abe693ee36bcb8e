from collections import namedtuple

"""
platform base module
====================

Contains the host identity directory API. This base implementation knows
no accounts at all: every lookup reports "absent" and the enumerations are
empty, so an IdMapping using it only ever produces synthetic ids and
decimal names. Platforms with an account database override the methods.

Contract for all implementations:

- the by-name / by-id lookups return a pwent or None. None means "no such
  account" and also "the directory could not answer", callers do not
  distinguish these.
- users() / groups() return iterables of pwent for seeding a mapping.
- implementations are read-only oracles, they never cache or mutate anything.
"""

# seed entry / directory answer: numeric id and name of one account
pwent = namedtuple("pwent", "id name")


class HostDirectory:
    def user_by_name(self, name):
        """Return the pwent of user *name* or None."""
        return None

    def user_by_id(self, uid):
        """Return the pwent of user id *uid* or None."""
        return None

    def group_by_name(self, name):
        """Return the pwent of group *name* or None."""
        return None

    def group_by_id(self, gid):
        """Return the pwent of group id *gid* or None."""
        return None

    def users(self):
        """Return all known users as pwent list."""
        return []

    def groups(self):
        """Return all known groups as pwent list."""
        return []
