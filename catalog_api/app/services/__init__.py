"""
Service layer abstraction.

Services hold the catalog logic so that API handlers only translate
between HTTP and service calls.
"""
