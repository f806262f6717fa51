"""Built-in geometric patterns. Each module registers one pattern."""
