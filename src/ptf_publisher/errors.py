"""
ptf_publisher.errors

Domain errors raised by services and translated to HTTP responses in one place
(`api.app._register_error_handlers`).
"""

from __future__ import annotations


class PublisherError(Exception):
    status_code: int = 500


class NotFoundError(PublisherError):
    status_code = 404


class InvalidInputError(PublisherError):
    status_code = 400


class ConflictError(PublisherError):
    status_code = 409


class StorageError(PublisherError):
    """Object store rejected or failed an operation."""

    status_code = 502


class BroadcastError(PublisherError):
    status_code = 400


class AuthenticationError(PublisherError):
    status_code = 401
