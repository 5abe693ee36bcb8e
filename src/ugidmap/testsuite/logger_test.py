import json
import logging
from io import StringIO

import pytest

from ..logger import find_parent_module, create_logger, setup_logging, JsonFormatter

logger = create_logger()


@pytest.fixture()
def io_logger():
    io = StringIO()
    handler = setup_logging(stream=io, env_var=None)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.setLevel(logging.DEBUG)
    return io


@pytest.fixture()
def restore_logging():
    yield
    # fileConfig() disables all loggers existing at that time, undo that for the following tests
    for existing in logging.Logger.manager.loggerDict.values():
        if isinstance(existing, logging.Logger):
            existing.disabled = False
    setup_logging(env_var=None)


def test_setup_logging(io_logger):
    logger.info("hello world")
    assert io_logger.getvalue() == "ugidmap.testsuite.logger_test: hello world\n"


def test_multiple_loggers(io_logger):
    logger = logging.getLogger(__name__)
    logger.info("hello world 1")
    assert io_logger.getvalue() == "ugidmap.testsuite.logger_test: hello world 1\n"
    logger = logging.getLogger("ugidmap.testsuite.logger_test")
    logger.info("hello world 2")
    assert io_logger.getvalue() == (
        "ugidmap.testsuite.logger_test: hello world 1\nugidmap.testsuite.logger_test: hello world 2\n"
    )
    io_logger.truncate(0)
    io_logger.seek(0)
    logger.info("hello world 2")
    assert io_logger.getvalue() == "ugidmap.testsuite.logger_test: hello world 2\n"


def test_setup_logging_configfile(tmp_path, restore_logging):
    logfile = tmp_path / "ugidmap.log"
    conf = tmp_path / "logging.conf"
    conf.write_text(
        f"""
[loggers]
keys=root

[logger_root]
handlers=file
level=NOTSET

[handlers]
keys=file

[handler_file]
class=FileHandler
level=INFO
formatter=file
args=({str(logfile)!r},)

[formatters]
keys=file

[formatter_file]
format=FILE %(levelname)s: %(message)s
"""
    )
    assert setup_logging(conf_fname=str(conf), env_var=None) is None
    logging.getLogger("ugidmap.testsuite.configured").debug("hello debug")
    logging.getLogger("ugidmap.testsuite.configured").info("hello info")
    logging.getLogger().handlers[0].flush()
    contents = logfile.read_text()
    assert "FILE INFO: hello info\n" in contents
    assert "hello debug" not in contents


def test_setup_logging_bad_configfile(tmp_path, restore_logging):
    io = StringIO()
    handler = setup_logging(stream=io, conf_fname=str(tmp_path / "missing.conf"), env_var=None, level="debug")
    assert handler is not None
    assert "setup_logging for" in io.getvalue()
    assert "failed with" in io.getvalue()


def test_json_formatter():
    record = logging.LogRecord("ugidmap.mapping", logging.WARNING, __file__, 1, "hello %s", ("json",), None)
    record.msgid = "Test.Msgid"
    data = json.loads(JsonFormatter("%(message)s").format(record))
    assert data["type"] == "log_message"
    assert data["levelname"] == "WARNING"
    assert data["name"] == "ugidmap.mapping"
    assert data["message"] == "hello json"
    assert data["msgid"] == "Test.Msgid"


def test_parent_module():
    assert find_parent_module() == __name__


def test_lazy_logger():
    # just calling all the methods of the proxy
    logger.setLevel(logging.DEBUG)
    logger.debug("debug")
    logger.info("info")
    logger.warning("warning", msgid="Test.Warning")
    logger.error("error")
    logger.critical("critical")
    logger.log(logging.INFO, "info")
    try:
        raise Exception
    except Exception:
        logger.exception("exception")


def test_lazy_logger_child(io_logger):
    child = logger.getChild("child")
    child.info("from child")
    assert io_logger.getvalue() == "ugidmap.testsuite.logger_test.child: from child\n"


def test_lazy_logger_uses_plain_logger_name(io_logger):
    # every dotted name maps straight to the logging module's logger of that name
    debug_logger = create_logger("ugidmap.debug.lookups")
    debug_logger.setLevel(logging.INFO)
    debug_logger.info("lookup trace")
    assert io_logger.getvalue() == "ugidmap.debug.lookups: lookup trace\n"
    assert not hasattr(debug_logger, "isEnabledFor")
