"""
Exceptions raised by the admin page adapter.
"""

from __future__ import annotations


class AdminPageError(RuntimeError):
    """Base admin page error."""


class MissingDependencyError(AdminPageError):
    """A field needs a host plugin that is not installed."""


class InvalidFieldError(AdminPageError, ValueError):
    """A field descriptor is missing a required property."""


class InvalidLocationError(AdminPageError, ValueError):
    """The page placement location is not offered by the host."""


class PermissionDeniedError(AdminPageError):
    """The host refused the request for the current user."""
