"""Purchase use cases."""
