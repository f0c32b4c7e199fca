"""Command-line interface (``alphabet-soup``)."""
