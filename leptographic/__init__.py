"""Accessible, Tailwind-styled UI components rendered to HTML, with a showcase server."""

__version__ = "0.1.0"