"""Application package for the BSc study materials catalog backend.

This package exposes the store, query, service and model modules used by
the FastAPI application and the HTTP client. Individual modules contain
the concrete implementations and documentation.
"""
