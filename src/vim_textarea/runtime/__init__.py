"""Runtime services (telemetry) shared by every vim_textarea component."""

from . import telemetry

__all__ = ["telemetry"]
