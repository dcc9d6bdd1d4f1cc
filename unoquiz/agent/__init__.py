"""Agent interface."""
