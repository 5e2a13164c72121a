"""Application layer - demo entry points and services."""
