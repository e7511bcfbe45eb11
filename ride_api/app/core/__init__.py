"""Configuration, logging, database access and response headers."""
