"""Command-line interface for rijksregisternummer."""
