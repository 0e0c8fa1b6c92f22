"""Per-user saved-car lists."""
