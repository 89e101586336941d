"""
API layer for the User service.

Exposes HTTP endpoints under /api/v1 (users, health) plus the root
information and status endpoints.
"""
