"""Service layer orchestrating library calls."""
