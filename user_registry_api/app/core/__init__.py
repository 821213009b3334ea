"""Core infrastructure: settings, logging and the record store."""
