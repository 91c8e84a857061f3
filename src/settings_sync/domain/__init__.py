"""Domain layer — models, rules and ports with no I/O."""
