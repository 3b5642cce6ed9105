"""
API layer for the auth backend.

Exposes POST /auth/signup, POST /auth/login and GET /health.
"""
