"""Errors raised by adapters to external services."""


class ProviderError(Exception):
    """An external provider could not serve a request.

    Attributes:
        provider: Name of the provider ("github")
        status_code: HTTP status returned by the provider, if it answered
    """

    provider = "external"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
