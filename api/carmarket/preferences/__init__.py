"""Per-user like/dislike preferences."""
