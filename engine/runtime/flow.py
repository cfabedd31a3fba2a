"""Transition table resolution."""

from __future__ import annotations

from engine.api.flow import FlowContext, FlowPayload, FlowTransition


class RuntimeFlowProgram[TState]:
    """First-match transition table; rows are tried in declaration order."""

    def __init__(self, transitions: tuple[FlowTransition[TState], ...]) -> None:
        self._transitions = transitions

    def resolve(
        self, current_state: TState, trigger: str, *, payload: FlowPayload | None = None
    ) -> TState | None:
        for transition in self._transitions:
            if transition.trigger != trigger:
                continue
            if transition.source is not None and transition.source != current_state:
                continue
            context = FlowContext(
                trigger=trigger,
                source=current_state,
                target=transition.target,
                payload=payload,
            )
            if transition.guard is not None and not transition.guard(context):
                continue
            if transition.after is not None:
                transition.after(context)
            return transition.target
        return None
