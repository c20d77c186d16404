"""Environment-backed input reader."""
