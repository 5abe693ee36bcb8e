# identity classes, each one has its own forward (name -> id) and reverse (id -> name) table
USER = "user"
GROUP = "group"

# names resolved from an id are cut to this length before they are cached, so they fit
# into the fixed-width owner/group fields of the consumers (e.g. a 50 byte field incl. NUL).
MAX_NAME_LENGTH = 49

# synthetic ids are the low 32 bits of the folded md5 digest
GUID_MASK = 0xFFFFFFFF

# file in the config dir holding the salt, used if neither --salt nor UGIDMAP_SALT is given
SALT_FILE_NAME = "salt"

# return codes returned by ugidmap command
EXIT_SUCCESS = 0  # everything done, no problems
EXIT_WARNING = 1  # reserved: reached normal end of operation, but there were issues (no command warns yet)
EXIT_ERROR = 2  # terminated abruptly, did not reach end of operation (generic error)
EXIT_SIGNAL_BASE = 128  # terminated due to signal, rc = 128 + sig_no
