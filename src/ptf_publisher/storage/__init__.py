"""
ptf_publisher.storage

Object storage package.

Responsibilities:
- Talk to the S3-compatible bucket that holds slide images and audio.
- Build the object keys and public URLs used by the gallery.
"""

# Package marker.
