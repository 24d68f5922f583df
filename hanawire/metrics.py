"""Gauges describing the state of the client listener."""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, field

NAMESPACE = "SAP_HANA_compatibility_layer_for_MongoDB_Wire_Protocol"
SUBSYSTEM = "client"


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Gauge:
    """A thread-safe numeric value that can go up and down."""

    def __init__(self, name: str, help_text: str = "") -> None:
        self.name = name
        self.help = help_text
        self._value = 0.0
        self._lock = threading.Lock()

    @property
    def value(self) -> float:
        """The current value."""
        with self._lock:
            return self._value

    def inc(self) -> None:
        """Add one to the value."""
        with self._lock:
            self._value += 1

    def dec(self) -> None:
        """Subtract one from the value."""
        with self._lock:
            self._value -= 1

    def set(self, value: float) -> None:
        """Replace the value."""
        with self._lock:
            self._value = float(value)

    def exposition(self) -> str:
        """Render the gauge in the Prometheus text exposition format."""
        help_text = self.help.replace("\\", "\\\\").replace("\n", "\\n")
        return (
            f"# HELP {self.name} {help_text}\n"
            f"# TYPE {self.name} gauge\n"
            f"{self.name} {_format_value(self.value)}\n"
        )


def _connected_gauge() -> Gauge:
    return Gauge(
        f"{NAMESPACE}_{SUBSYSTEM}_connected",
        "The current number of connected clients.",
    )


@dataclass
class ListenerMetrics:
    """Metrics kept by the listener."""

    connected_clients: Gauge = field(default_factory=_connected_gauge)

    def collect(self) -> list[Gauge]:
        """Return every metric this collection holds."""
        return [self.connected_clients]