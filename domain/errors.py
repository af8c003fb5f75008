class DomainError(Exception):
    """Base error for ledger domain failures."""


class StorageError(DomainError):
    """Secure store or ledger payload could not be read or written."""
