"""Ensemble-wide probes."""
