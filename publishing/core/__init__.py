"""Core workflow and role logic."""
