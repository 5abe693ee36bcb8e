import json

from ...constants import EXIT_SUCCESS, EXIT_ERROR
from ...mapping import gen_guid
from .. import FakeDirectory
from . import exec_cmd


def test_user():
    rc, output = exec_cmd("--salt", "s", "user", "alice", "ghost")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["alice 1000", "ghost 1745000180"]


def test_group():
    rc, output = exec_cmd("--salt", "s", "group", "users", "ghost")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["users 100", f"ghost {gen_guid('s', 'ghost')}"]


def test_uid_gid():
    rc, output = exec_cmd("--salt", "s", "uid", "1000", "4242")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["alice 1000", "4242 4242"]
    rc, output = exec_cmd("--salt", "s", "gid", "0", "100")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["root 0", "users 100"]


def test_uid_not_a_number():
    rc, output = exec_cmd("--salt", "s", "uid", "alice")
    assert rc == EXIT_ERROR
    assert "invalid id 'alice'" in output


def test_json():
    rc, output = exec_cmd("--salt", "s", "user", "--json", "alice", "ghost")
    assert rc == EXIT_SUCCESS
    data = json.loads(output)
    assert data == {
        "kind": "user",
        "results": [{"name": "alice", "id": 1000}, {"name": "ghost", "id": 1745000180}],
    }


def test_no_seed():
    directory = FakeDirectory(users=[(1000, "alice")])
    rc, output = exec_cmd("--salt", "s", "--no-seed", "uid", "1000", directory=directory)
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["alice 1000"]
    assert directory.queries == [("user_by_id", 1000)]


def test_salt_from_env(monkeypatch):
    monkeypatch.setenv("UGIDMAP_SALT", "t")
    rc, output = exec_cmd("guid", "ghost")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == [f"ghost {gen_guid('t', 'ghost')}"]


def test_guid_ignores_host():
    # alice exists on the host, but guid only computes the synthetic id
    directory = FakeDirectory(users=[(1000, "alice")])
    rc, output = exec_cmd("--salt", "s", "guid", "alice", directory=directory)
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == [f"alice {gen_guid('s', 'alice')}"]
    assert directory.queries == []


def test_missing_arguments():
    rc, output = exec_cmd("--salt", "s", "user")
    assert rc != EXIT_SUCCESS
