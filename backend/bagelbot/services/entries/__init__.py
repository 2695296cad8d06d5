"""Order entry services."""
