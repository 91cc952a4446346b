"""House representative lookup by ZIP code."""
