"""MetricInstruments registry: typed accessors for all OTel instruments."""

from __future__ import annotations

import logging
from opentelemetry import metrics
from ..config.telemetry import (
    OTEL_SERVICE_NAME,
    METRIC_ERRORS_TOTAL,
    METRIC_ACTIVE_CONNECTIONS,
    METRIC_BADGE_PUSHES_TOTAL,
    METRIC_MESSAGES_DROPPED_TOTAL,
    METRIC_MESSAGES_RELAYED_TOTAL,
    METRIC_MESSAGES_PERSISTED_TOTAL,
    METRIC_CONNECTIONS_ACCEPTED_TOTAL,
    METRIC_CONNECTIONS_REJECTED_TOTAL,
)

logger = logging.getLogger(__name__)


def _counter(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.Counter:
    name, unit, desc = spec
    return meter.create_counter(name, unit=unit, description=desc)


def _updown(meter: metrics.Meter, spec: tuple[str, str, str]) -> metrics.UpDownCounter:
    name, unit, desc = spec
    return meter.create_up_down_counter(name, unit=unit, description=desc)


class MetricInstruments:
    """Holds all OTel metric instruments created from config specs."""

    __slots__ = (
        "connections_accepted_total",
        "connections_rejected_total",
        "messages_persisted_total",
        "messages_relayed_total",
        "messages_dropped_total",
        "badge_pushes_total",
        "errors_total",
        "active_connections",
    )

    def __init__(self, meter: metrics.Meter) -> None:
        # Counters
        self.connections_accepted_total = _counter(meter, METRIC_CONNECTIONS_ACCEPTED_TOTAL)
        self.connections_rejected_total = _counter(meter, METRIC_CONNECTIONS_REJECTED_TOTAL)
        self.messages_persisted_total = _counter(meter, METRIC_MESSAGES_PERSISTED_TOTAL)
        self.messages_relayed_total = _counter(meter, METRIC_MESSAGES_RELAYED_TOTAL)
        self.messages_dropped_total = _counter(meter, METRIC_MESSAGES_DROPPED_TOTAL)
        self.badge_pushes_total = _counter(meter, METRIC_BADGE_PUSHES_TOTAL)
        self.errors_total = _counter(meter, METRIC_ERRORS_TOTAL)
        # UpDown counters
        self.active_connections = _updown(meter, METRIC_ACTIVE_CONNECTIONS)


_metrics: MetricInstruments | None = None


def get_metrics() -> MetricInstruments:
    """Return the global MetricInstruments (no-op meter if OTel not initialized)."""
    global _metrics  # noqa: PLW0603
    if _metrics is None:
        meter = metrics.get_meter(OTEL_SERVICE_NAME)
        _metrics = MetricInstruments(meter)
    return _metrics


def initialize_metrics() -> None:
    """Create MetricInstruments from the global meter."""
    global _metrics  # noqa: PLW0603
    meter = metrics.get_meter(OTEL_SERVICE_NAME)
    _metrics = MetricInstruments(meter)
    logger.info("Telemetry metrics initialized")


__all__ = ["MetricInstruments", "get_metrics", "initialize_metrics"]
