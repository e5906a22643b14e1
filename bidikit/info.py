"""Library information and the debug switch."""

from __future__ import annotations

from .types import INTERFACE_VERSION_STRING, NAME, UNICODE_VERSION, VERSION

__all__ = ["debug_status", "set_debug", "version_info"]


class _DebugState:
    enabled = False


def debug_status() -> bool:
    """Return whether debug output is enabled."""
    return _DebugState.enabled


def set_debug(state: bool) -> bool:
    """Enable or disable debug output and return the new state."""
    _DebugState.enabled = bool(state)
    return _DebugState.enabled


def version_info() -> str:
    """Return a human-readable description of the library version."""
    options = " --enable-debug" if _DebugState.enabled else ""
    return (
        f"({NAME}) {VERSION}\n"
        f"interface version {INTERFACE_VERSION_STRING},\n"
        f"Unicode Character Database version {UNICODE_VERSION},\n"
        f"Configure options{options}.\n"
    )