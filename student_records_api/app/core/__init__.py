"""Core infrastructure: settings, logging, the record store and error types."""
