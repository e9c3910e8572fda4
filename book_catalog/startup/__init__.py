"""Startup wiring and one-off maintenance entrypoints."""
