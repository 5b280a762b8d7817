"""Core infrastructure: database, models, schemas, errors."""
