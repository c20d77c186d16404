"""Workflow command writer."""
