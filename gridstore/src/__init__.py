"""Implementation packages for :mod:`gridstore`."""
