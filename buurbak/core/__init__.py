"""Settings and credential helpers."""
