"""Time normalization helpers."""
