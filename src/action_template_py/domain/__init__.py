"""Domain layer: error taxonomy."""
