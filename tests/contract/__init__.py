"""Contract tests: every adapter of a port must pass the same suite."""
