"""
Custom exceptions shared by the services and API layers.
"""


class ServiceError(Exception):
    """Base class for exceptions raised by the services layer."""
    pass


class NotFoundError(ServiceError, ValueError):
    """Raised when a lookup by identity finds no record; a client error, not a server fault."""
    pass
