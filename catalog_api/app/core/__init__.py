"""Configuration, logging, error types and file storage."""
