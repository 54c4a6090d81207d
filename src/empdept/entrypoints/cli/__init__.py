"""Command-line interface for EMPDEPT."""
