"""Authorization and log hygiene helpers."""
