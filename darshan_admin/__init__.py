"""
Darshan Admin - administrative backend for destinations, events and user activity.
"""

__version__ = "1.0.0"
