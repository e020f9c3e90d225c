"""Core infrastructure: configuration, logging, errors and the handler contract."""
