"""
Application package initializer.

The API is split into ``core`` (configuration, logging, errors and
file storage), ``schemas`` (pydantic models), ``services`` (catalog
operations and image URL projection) and ``api`` (HTTP routes).
"""
