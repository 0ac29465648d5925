"""Command-line tools for rastercmd."""
