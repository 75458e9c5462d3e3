"""Business logic layer for media app.

Owns the media item lookup used by dependent apps and the deletion
workflow that publishes media events.
"""
