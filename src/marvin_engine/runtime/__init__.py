"""Runtime services (logging, profiling) shared by the engine."""

from . import telemetry

__all__ = ["telemetry"]
