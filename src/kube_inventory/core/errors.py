"""
Exception types raised by the inventory core.
"""


class InventoryError(Exception):
    """Base class for errors raised inside the inventory service."""


class InvalidQueryError(InventoryError):
    """A list query parameter could not be interpreted (e.g. a non-numeric limit)."""

    status = 400


class UnknownResourceError(InventoryError):
    """Requested resource kind is not part of the resource table."""

    status = 404
