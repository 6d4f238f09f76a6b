"""Test public API surface - ensure imports work and exports are stable."""

import types

import pytest


def test_root_exports():
    import riokeys

    for name in riokeys.__all__:
        assert hasattr(riokeys, name), f"riokeys.{name} missing"
    assert callable(riokeys.lookup_run)
    assert callable(riokeys.recent_runs)


def test_version_string():
    import riokeys
    assert isinstance(riokeys.__version__, str)
    assert riokeys.__version__


def test_error_hierarchy():
    from riokeys.errors import CacheIOError, CorruptCacheError, DecodeError, RioError, TransportError

    for exc in (CacheIOError, CorruptCacheError, DecodeError, TransportError):
        assert issubclass(exc, RioError)
    assert issubclass(CacheIOError, OSError)
    assert issubclass(DecodeError, ValueError)


def test_cli_main_is_function():
    from riokeys import cli
    assert isinstance(cli.main, types.FunctionType)


@pytest.mark.parametrize("value,expected", [
    ("zul-jin", "zuljin"),
    ("zuljin", "zuljin"),
    ("sargeras", "sargeras"),
    ("illidan", "illidan"),
])
def test_server_from_cli(value, expected):
    from riokeys.codes import Server
    assert str(Server.from_cli(value)) == expected


def test_server_from_cli_unknown():
    from riokeys.codes import Server
    with pytest.raises(ValueError):
        Server.from_cli("stormrage")


def test_role_priorities():
    from riokeys.codes import Role
    assert Role.parse("tank").priority == 0
    assert Role.parse("healer").priority == 1
    assert Role.parse("dps").priority == 2
    assert Role.parse("anything").priority == 2
