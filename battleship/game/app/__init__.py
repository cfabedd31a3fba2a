"""Match orchestration over the core rules."""
