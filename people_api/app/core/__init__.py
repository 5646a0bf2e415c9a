"""Core infrastructure: settings, logging, the record store and errors."""
