"""Infrastructure layer: configuration, database, logging and caching."""
