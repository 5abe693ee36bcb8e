import json

from ...constants import EXIT_SUCCESS
from . import exec_cmd


def test_table():
    rc, output = exec_cmd("--salt", "s", "table")
    assert rc == EXIT_SUCCESS
    assert output.splitlines() == ["user 0 root", "user 1000 alice", "group 0 root", "group 100 users"]


def test_table_json():
    rc, output = exec_cmd("--salt", "s", "table", "--json")
    assert rc == EXIT_SUCCESS
    data = json.loads(output)
    assert data["user"] == [{"name": "root", "id": 0}, {"name": "alice", "id": 1000}]
    assert data["group"] == [{"name": "root", "id": 0}, {"name": "users", "id": 100}]
    assert data["stats"] == {"usernames": 2, "uids": 2, "groupnames": 2, "gids": 2}


def test_table_no_seed():
    rc, output = exec_cmd("--salt", "s", "--no-seed", "table")
    assert rc == EXIT_SUCCESS
    assert output == ""
