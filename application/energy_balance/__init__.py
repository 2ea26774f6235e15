"""Energy balance use cases."""
