"""Adapters (infrastructure) for RER departures."""
