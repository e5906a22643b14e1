import pytest

from bidikit.info import debug_status, set_debug, version_info
from bidikit.types import INTERFACE_VERSION_STRING, NAME, UNICODE_VERSION, VERSION


@pytest.fixture
def restore_debug():
    saved = debug_status()
    yield
    set_debug(saved)


def test_set_debug_round_trip(restore_debug):
    assert set_debug(True) is True
    assert debug_status() is True
    assert set_debug(False) is False
    assert debug_status() is False


def test_set_debug_coerces_truthiness(restore_debug):
    assert set_debug(1) is True
    assert set_debug(0) is False


def test_version_info_header():
    info = version_info()
    assert info.startswith(f"({NAME}) {VERSION}\n")


def test_version_info_mentions_versions():
    info = version_info()
    assert f"interface version {INTERFACE_VERSION_STRING}," in info
    assert f"Unicode Character Database version {UNICODE_VERSION}," in info


def test_version_info_reflects_debug(restore_debug):
    set_debug(True)
    assert "--enable-debug" in version_info()
    set_debug(False)
    assert "--enable-debug" not in version_info()