"""Infrastructure layer for extras app.

This package contains integrations with external systems:
- Database access for extra file records (repository)
- Local file system checks and permanent deletion
- Recycle bin for recoverable deletion

Keep infrastructure concerns separate from business logic.
"""
