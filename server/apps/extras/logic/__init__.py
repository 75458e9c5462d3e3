"""Business logic layer for extras app.

This package contains the lifecycle rules for extra file records:
- Timestamping and routing of upserts
- Cascading cleanup when media items or media files are deleted

Database and disk access live in ``infrastructure``.
"""
