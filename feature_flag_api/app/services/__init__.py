"""
Service layer.

Holds the in-memory flag store the API handlers operate on.
"""
