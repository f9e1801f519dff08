"""
Error kinds raised by the storage layer
"""


class StorageError(Exception):
    """Base exception for storage failures"""
    pass


class SchemaInitError(StorageError):
    """Raised when the schema cannot be created for a reason other than it already existing"""
    pass


class UniquenessViolation(StorageError):
    """Raised when an insert or update breaks a unique index"""
    pass


class TransactionFailure(StorageError):
    """Raised when a batch insert is rolled back; the cause is chained"""
    pass


class StorageClosedError(StorageError):
    """Raised when an operation is submitted after the storage was closed"""
    pass


class ValidationError(ValueError):
    """Raised when a username or password is rejected by the credential validator"""
    pass
