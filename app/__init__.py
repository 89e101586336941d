"""
User Service Application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the User domain (entity, validation rules, repository contract), the use
cases orchestrating them, and the MongoDB persistence adapter.
"""
