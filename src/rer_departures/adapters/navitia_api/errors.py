"""Errors raised by the Navitia adapter."""

from rer_departures.domain.models.error_details import ErrorDetails


class NavitiaApiError(Exception):
    """The Navitia API could not be queried or answered with an error."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(details.reason)
        self.details = details


class MissingCredentialsError(Exception):
    """No Navitia API key is configured."""

    def __init__(self) -> None:
        super().__init__("API key not configured")
