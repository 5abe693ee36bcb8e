import os
import stat
from pathlib import Path

import platformdirs

from .errors import Error, SaltFileError

from ..constants import *  # NOQA

from ..logger import create_logger

logger = create_logger()


def ensure_dir(path, mode=stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO, pretty_deadly=True):
    """
    Ensures that the dir exists with the right permissions.
    1) Make sure the directory exists in a race-free operation
    2) If mode is not None and the directory has been created, give the right
    permissions to the leaf directory. The current umask value is masked out first.
    3) If pretty_deadly is True, catch exceptions, reraise them with a pretty
    message.
    Returns if the directory has been created and has the right permissions,
    An exception otherwise. If a deadly exception happened it is reraised.
    """
    try:
        Path(path).mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as e:
        if pretty_deadly:
            raise Error(str(e))
        else:
            raise


def get_config_dir(*, create=False):
    """Determine where ugidmap looks for its configuration (e.g. the salt file)"""
    # note: do not just give this as default to the environment.get(), platformdirs may touch the fs.
    config_dir = os.environ.get("UGIDMAP_CONFIG_DIR")
    if config_dir is None:
        config_dir = platformdirs.user_config_dir("ugidmap")
    if create:
        ensure_dir(config_dir)
    return config_dir


def read_salt_file(path):
    """Return the salt stored in *path* or None if there is no such file.

    Only a trailing line break is removed, everything else is part of the salt.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as fd:
            salt = fd.read()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise SaltFileError(path, e.strerror)
    return salt.rstrip("\r\n")


def get_salt(salt=None):
    """Determine the salt for synthetic ids:

    - *salt*, if given (e.g. from --salt)
    - UGIDMAP_SALT, if set
    - content of the salt file in the config dir, if it exists
    - the empty string
    """
    if salt is not None:
        return salt
    salt = os.environ.get("UGIDMAP_SALT")
    if salt is not None:
        return salt
    salt_path = Path(get_config_dir()) / SALT_FILE_NAME
    salt = read_salt_file(salt_path)
    if salt is not None:
        logger.debug("using salt from %s", salt_path)
        return salt
    logger.warning("No salt configured (--salt, UGIDMAP_SALT or %s), synthetic ids are predictable.", salt_path)
    return ""
