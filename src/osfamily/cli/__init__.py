"""Command-line entrypoints for osfamily."""
