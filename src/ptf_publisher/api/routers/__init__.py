"""
ptf_publisher.api.routers

HTTP routers: public reader pages, dashboard, auth, navigation and probes.
"""

# Package marker.
