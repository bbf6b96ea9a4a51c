"""Daily lesson use cases."""
