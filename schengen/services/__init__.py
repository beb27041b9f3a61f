"""Calculation stages: registry, presence, window, risk, safe entry, vector, cache."""
