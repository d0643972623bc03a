"""Command-line interface for fundtrack."""
