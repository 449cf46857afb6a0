"""Internal helpers (layered config)."""
