"""
Application Exceptions
"""

class StorageError(Exception):
    """
    Raised when the tasks table cannot be read or written
    (connection loss, constraint violation, ...).
    The underlying SQLAlchemy error is chained as __cause__.
    """
