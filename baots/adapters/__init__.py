"""Adapters for the boune CLI library and Bun's built-in bun:sqlite module."""