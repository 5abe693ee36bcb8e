import os

import pytest

if hasattr(pytest, "register_assert_rewrite"):
    pytest.register_assert_rewrite("ugidmap.testsuite")


from ugidmap.logger import setup_logging  # noqa: E402

# Ensure that the loggers exist for all tests
setup_logging()

from ugidmap.testsuite.platform.platform_test import fakeroot_detected, user_exists  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(tmpdir_factory, monkeypatch):
    # avoid to use anything from the outside environment:
    keys = [key for key in os.environ if key.startswith("UGIDMAP_")]
    for key in keys:
        monkeypatch.delenv(key, raising=False)
    # avoid that we read a salt file from the user's normal config directory:
    monkeypatch.setenv("UGIDMAP_CONFIG_DIR", str(tmpdir_factory.mktemp("ugidmap-config-dir")))


def pytest_report_header(config, start_path):
    tests = {"root": not fakeroot_detected(), "root user": user_exists("root")}
    enabled = []
    disabled = []
    for test in tests:
        if tests[test]:
            enabled.append(test)
        else:
            disabled.append(test)
    output = "Tests enabled: " + ", ".join(enabled) + "\n"
    output += "Tests disabled: " + ", ".join(disabled)
    return output
