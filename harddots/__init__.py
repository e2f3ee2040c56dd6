"""Dotfile manager that deploys configuration files as hard links from a Git repository."""

__version__ = "0.1.0"