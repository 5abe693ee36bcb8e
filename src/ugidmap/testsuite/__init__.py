import threading

from ..platform import HostDirectory, pwent


class FakeDirectory(HostDirectory):
    """
    In-memory host identity directory.

    Every by-name / by-id query is recorded in *queries* as (method name, key),
    so tests can check which lookups reached the "host". If *fail* is set, all
    queries raise it instead of answering.
    """

    def __init__(self, users=(), groups=(), fail=None):
        self._users = [pwent(*entry) for entry in users]
        self._groups = [pwent(*entry) for entry in groups]
        self.fail = fail
        self.queries = []
        self._queries_lock = threading.Lock()

    def _record(self, method, key):
        with self._queries_lock:
            self.queries.append((method, key))
        if self.fail is not None:
            raise self.fail

    @staticmethod
    def _find(entries, field, key):
        for entry in entries:
            if getattr(entry, field) == key:
                return entry
        return None

    def user_by_name(self, name):
        self._record("user_by_name", name)
        return self._find(self._users, "name", name)

    def user_by_id(self, uid):
        self._record("user_by_id", uid)
        return self._find(self._users, "id", uid)

    def group_by_name(self, name):
        self._record("group_by_name", name)
        return self._find(self._groups, "name", name)

    def group_by_id(self, gid):
        self._record("group_by_id", gid)
        return self._find(self._groups, "id", gid)

    def users(self):
        return list(self._users)

    def groups(self):
        return list(self._groups)
