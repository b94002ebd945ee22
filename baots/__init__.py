"""Builders and file generators for TypeScript CLI projects on Bun and boune."""

__version__ = "0.4.0"