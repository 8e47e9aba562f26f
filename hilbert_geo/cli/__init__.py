"""Command-line interface for Hilbert Geo."""
