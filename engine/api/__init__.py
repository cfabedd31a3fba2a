"""Public engine API contracts."""

from engine.api.flow import FlowContext, FlowProgram, FlowTransition, create_flow_program
from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging, get_logger

__all__ = [
    "EngineLoggingConfig",
    "FlowContext",
    "FlowProgram",
    "FlowTransition",
    "JsonFormatter",
    "configure_logging",
    "create_flow_program",
    "get_logger",
]
