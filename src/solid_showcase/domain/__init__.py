"""Domain layer - principles, demo value types and ports."""
