"""Infrastructure layer - logging, configuration, concurrency and utilities."""
