"""Player record directory management for the ranking engine."""
