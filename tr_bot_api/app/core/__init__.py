"""Core infrastructure: settings, logging, database handle and error handlers."""
