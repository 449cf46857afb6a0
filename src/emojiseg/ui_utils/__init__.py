"""Terminal formatting for CLI output."""
