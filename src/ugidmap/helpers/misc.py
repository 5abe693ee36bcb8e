import io
import json

from ..constants import *  # NOQA

from .errors import CommandError


def parse_id(value):
    """Parse a numeric uid / gid given on the command line."""
    try:
        return int(str(value), 10)
    except ValueError:
        raise CommandError(f"invalid id {value!r}, must be an integer") from None


def json_dump(obj):
    """Dump using ugidmap's JSON format."""
    return json.dumps(obj, sort_keys=True, indent=4, ensure_ascii=False)


def json_print(obj):
    print(json_dump(obj))


class ErrorIgnoringTextIOWrapper(io.TextIOWrapper):
    def write(self, s):
        if not self.closed:
            try:
                return super().write(s)
            except BrokenPipeError:
                try:
                    super().close()
                except OSError:
                    pass
        return len(s)
