import grp
import pwd

from .base import HostDirectory, pwent

# KeyError: no such entry, ValueError: e.g. embedded NUL in name,
# OverflowError: id does not fit into uid_t/gid_t, OSError: nss / io trouble
LOOKUP_ERRORS = (KeyError, ValueError, OverflowError, OSError)


class PosixDirectory(HostDirectory):
    """host identity directory backed by pwd / grp (i.e. nsswitch)"""

    def user_by_name(self, name):
        if not name:
            return None
        try:
            pw = pwd.getpwnam(name)
        except LOOKUP_ERRORS:
            return None
        return pwent(pw.pw_uid, pw.pw_name)

    def user_by_id(self, uid):
        try:
            pw = pwd.getpwuid(uid)
        except LOOKUP_ERRORS:
            return None
        return pwent(pw.pw_uid, pw.pw_name)

    def group_by_name(self, name):
        if not name:
            return None
        try:
            gr = grp.getgrnam(name)
        except LOOKUP_ERRORS:
            return None
        return pwent(gr.gr_gid, gr.gr_name)

    def group_by_id(self, gid):
        try:
            gr = grp.getgrgid(gid)
        except LOOKUP_ERRORS:
            return None
        return pwent(gr.gr_gid, gr.gr_name)

    def users(self):
        try:
            return [pwent(pw.pw_uid, pw.pw_name) for pw in pwd.getpwall()]
        except OSError:
            return []

    def groups(self):
        try:
            return [pwent(gr.gr_gid, gr.gr_name) for gr in grp.getgrall()]
        except OSError:
            return []
