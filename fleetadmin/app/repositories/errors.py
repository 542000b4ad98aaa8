class DuplicateEntityError(Exception):
    """Raised by repositories when the store rejects a write on a unique constraint"""
