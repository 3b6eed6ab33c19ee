"""
ptf_publisher

Top-level package for the Project Timothy Fund blog publisher service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "1.0.2"


# --- Module Notes -----------------------------------------------------------
# The user-facing release label (e.g. "v1.0.002") lives in settings.app_version.
