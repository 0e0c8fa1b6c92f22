"""Vehicle search."""
