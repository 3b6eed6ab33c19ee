"""
ptf_publisher.mail

Broadcast email package.

Responsibilities:
- Render the update announcement sent to subscribers.
- Deliver BCC batches through an SMTP relay.
"""

# Package marker.
