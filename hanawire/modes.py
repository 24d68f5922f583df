"""Operation modes of a client connection."""

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """How requests from a client are served."""

    NORMAL = "normal"
    """Only handle requests locally."""
    PROXY = "proxy"
    """Only forward requests to another wire-protocol compatible service."""
    DIFF_NORMAL = "diff-normal"
    """Handle and forward requests, log the diff, reply with the local response."""
    DIFF_PROXY = "diff-proxy"
    """Handle and forward requests, log the diff, reply with the proxy response."""

    def __str__(self) -> str:
        return self.value

    @property
    def handles_locally(self) -> bool:
        """Whether requests are handled by the local handler."""
        return self is not Mode.PROXY

    @property
    def uses_proxy(self) -> bool:
        """Whether requests are forwarded to the proxy address."""
        return self is not Mode.NORMAL

    @property
    def diffs(self) -> bool:
        """Whether local and proxy responses are compared and the diff logged."""
        return self in (Mode.DIFF_NORMAL, Mode.DIFF_PROXY)

    @property
    def replies_from_proxy(self) -> bool:
        """Whether the client receives the proxy's response."""
        return self in (Mode.PROXY, Mode.DIFF_PROXY)


ALL_MODES: tuple[Mode, ...] = tuple(Mode)
"""Every mode, the first one being the default."""

DEFAULT_MODE: Mode = ALL_MODES[0]


def parse_mode(value: str | Mode) -> Mode:
    """Return the mode named by ``value``; raise ValueError for an unknown name."""
    if isinstance(value, Mode):
        return value
    for mode in ALL_MODES:
        if mode.value == value:
            return mode
    raise ValueError(f'Unknown mode "{value}".')