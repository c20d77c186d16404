"""Application layer: host ports and the step logic."""
