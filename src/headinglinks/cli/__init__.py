"""Command line interface for headinglinks."""
