"""Core catalog, addressing, query and formatting logic."""
