"""Internal utilities for nametree."""
