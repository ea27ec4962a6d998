"""Designer dashboard persistence and sync core."""
