"""Engine runtime modules."""

from engine.runtime.flow import RuntimeFlowProgram
from engine.runtime.logging import (
    configure_engine_logging,
    setup_engine_logging,
    shutdown_engine_logging,
)
from engine.runtime.scheduler import Scheduler

__all__ = [
    "RuntimeFlowProgram",
    "Scheduler",
    "configure_engine_logging",
    "setup_engine_logging",
    "shutdown_engine_logging",
]
