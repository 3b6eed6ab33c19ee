"""
ptf_publisher.navigation

Fragment-based navigation for the single-page front end.
"""

# Package marker.
