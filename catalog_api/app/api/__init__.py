"""
API package containing the HTTP routes.

``router`` aggregates the domain endpoint modules found in
``endpoints``.
"""
