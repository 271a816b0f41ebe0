"""Core layer - configuration, results, errors, lifecycle and container."""
