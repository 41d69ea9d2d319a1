"""Domain layer: entities, pure helpers and the error taxonomy (no I/O)."""
