"""Toy domain types for each SOLID principle, violation and refactored side by side."""
