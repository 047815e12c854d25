"""
Error types raised by the Route Provider and Nearby Entity Directory adapters.
"""


class RouteProviderError(Exception):
    """
    Base class for failures that prevent obtaining any candidate route.

    Carries a stable `code` and a human-readable `message` so callers never
    need to inspect provider status codes.
    """

    code = "route_provider_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoRoutesFound(RouteProviderError):
    """The provider answered but found no walking route."""

    code = "no_routes_found"

    def __init__(self, message: str = "No walking routes found between these locations."):
        super().__init__(message)


class ProviderUnavailable(RouteProviderError):
    """The provider denied the request or is misconfigured."""

    code = "provider_unavailable"


class ProviderNetworkError(ProviderUnavailable):
    """The provider could not be reached or did not answer in time."""

    code = "network_failure"


class DirectoryLookupFailed(Exception):
    """A single nearby-entity lookup failed or timed out."""
