"""Internal helpers for lazyspf."""
