"""Storage failures surfaced by the in-process stores."""


class PersistenceError(Exception):
    """Raised when a store cannot complete a write."""


__all__ = ["PersistenceError"]
