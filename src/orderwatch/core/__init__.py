"""Core publish/notify primitives."""
