"""Command-line plotting and debug helpers."""
