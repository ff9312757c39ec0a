"""Core annotation, label resolution and rendering for headinglinks."""
