"""Command-line tools for staticmap."""
