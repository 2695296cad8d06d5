"""Store open/closed status services."""
