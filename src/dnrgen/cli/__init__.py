"""Command-line interface for dnrgen."""
