"""Failures raised by the persistence gateway."""


class RepositoryError(Exception):
    """Base class for store-level failures."""


class ConstraintViolation(RepositoryError):
    """A write broke a store constraint (e.g. the unique email index)."""


class StoreUnavailable(RepositoryError):
    """The store connection could not be used."""
