from packaging.version import parse as parse_version

from .. import __version__, __version_tuple__


def test_version_tuple():
    assert __version_tuple__ == parse_version(__version__).release
    assert all(isinstance(v, int) for v in __version_tuple__)
