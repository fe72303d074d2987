"""Exceptions raised by the containers in this package."""


class CapacityError(Exception):
    """Raised when a bounded container has no room for another element."""


class EmptyError(IndexError):
    """Raised when an element is requested from an empty container."""