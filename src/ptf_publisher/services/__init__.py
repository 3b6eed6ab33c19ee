"""
ptf_publisher.services

Service layer (transaction owners).

Responsibilities:
- Publishing, gallery editing, reader content, subscribers and broadcasts.
- Commit per workflow step; repositories only flush.
"""

# Package marker.
