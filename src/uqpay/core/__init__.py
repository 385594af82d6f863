"""Core infrastructure: configuration, logging, errors and HTTP transport."""
