"""Public flow (transition table) API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

type FlowPayload = object


@dataclass(frozen=True, slots=True)
class FlowContext[TState]:
    """Context handed to guards and hooks while a transition is resolved."""

    trigger: str
    source: TState
    target: TState
    payload: FlowPayload | None = None


type TransitionGuard[TState] = Callable[[FlowContext[TState]], bool]
type TransitionHook[TState] = Callable[[FlowContext[TState]], None]


@dataclass(frozen=True, slots=True)
class FlowTransition[TState]:
    """One row of a transition table; `source=None` matches any state."""

    trigger: str
    source: TState | None
    target: TState
    guard: TransitionGuard[TState] | None = None
    after: TransitionHook[TState] | None = None


class FlowProgram[TState](Protocol):
    """Stateless transition table: callers own the current state."""

    def resolve(
        self, current_state: TState, trigger: str, *, payload: FlowPayload | None = None
    ) -> TState | None:
        """Return the next state, or None when no transition accepts the trigger."""


def create_flow_program[TState](
    transitions: tuple[FlowTransition[TState], ...],
) -> FlowProgram[TState]:
    """Create the default transition-table implementation."""
    from engine.runtime.flow import RuntimeFlowProgram

    return RuntimeFlowProgram(transitions)
