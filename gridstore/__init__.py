"""Resizable two-dimensional grid container."""
