"""Domain layer - wire request shapes and ports."""
