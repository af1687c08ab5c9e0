"""Authentication: tokens, passwords and the bearer dependency."""
