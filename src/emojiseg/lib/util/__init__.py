"""Logging and terminal display helpers."""
