"""User-facing messages for repository failures."""

from typing import assert_never

from news_reader.news.errors import NewsRepositoryError, RepositoryErrorKind

NETWORK_MESSAGE = "No internet connection. Please check your network and try again."
TIMEOUT_MESSAGE = "Request timed out. Please try again."
AUTHENTICATION_MESSAGE = "API authentication failed. Please check the configuration."
RATE_LIMITED_MESSAGE = "Too many requests. Please wait a moment and try again."
CONFIGURATION_MESSAGE = "App configuration error. Please contact support."
GENERIC_MESSAGE = "Something went wrong. Please try again later."
UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."


def user_message(error: NewsRepositoryError) -> str:
    """Translate a repository error into text fit to show an end user.

    The ``match`` is exhaustive over :class:`RepositoryErrorKind`; a new kind
    fails type checking here until it is given a message.
    """
    kind = error.kind
    match kind:
        case RepositoryErrorKind.NETWORK:
            return NETWORK_MESSAGE
        case RepositoryErrorKind.TIMEOUT:
            return TIMEOUT_MESSAGE
        case RepositoryErrorKind.AUTHENTICATION:
            return AUTHENTICATION_MESSAGE
        case RepositoryErrorKind.RATE_LIMITED:
            return RATE_LIMITED_MESSAGE
        case RepositoryErrorKind.CONFIGURATION:
            return CONFIGURATION_MESSAGE
        case RepositoryErrorKind.VALIDATION:
            return error.message
        case (
            RepositoryErrorKind.PARSING
            | RepositoryErrorKind.API
            | RepositoryErrorKind.HTTP
            | RepositoryErrorKind.UNKNOWN
        ):
            return GENERIC_MESSAGE
        case _:
            assert_never(kind)
