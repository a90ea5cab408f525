"""Infrastructure adapters for networks, key stores and configuration."""
