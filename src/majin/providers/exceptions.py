"""
Provider-specific exceptions
"""

from majin.core.exceptions import ErrorKind, GenerationError


class ProviderError(GenerationError):
    """Raised when the upstream vendor call fails.

    Carries the HTTP status when the failure came with one. The message is
    built from the vendor's own error text and never contains the credential.
    """

    kind = ErrorKind.PROVIDER_ERROR

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        status_code: int | None = None,
        **kwargs,
    ):
        self.provider = provider
        self.status_code = status_code
        super().__init__(message, **kwargs)


class ProviderConnectionError(ProviderError):
    """Raised when the provider cannot be reached or the request times out"""
