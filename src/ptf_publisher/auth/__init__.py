"""
ptf_publisher.auth

Authentication/authorization package.

Responsibilities:
- JWT helpers and validation.
- Password hashing for dashboard accounts.
- FastAPI auth dependencies (Principal + admin gate).
"""

# Package marker.
