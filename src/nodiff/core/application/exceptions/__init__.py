from nodiff.core.application.exceptions.nodiff_exceptions import (
    ConfigurationError,
    DiffExecutionError,
    HostingGatewayError,
    NoDiffError,
    UnsupportedEventError,
)

__all__ = [
    "ConfigurationError",
    "DiffExecutionError",
    "HostingGatewayError",
    "NoDiffError",
    "UnsupportedEventError",
]
