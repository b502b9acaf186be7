"""Configuration, logging and grid helper utilities."""
