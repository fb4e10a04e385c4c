class CoverageFinderError(Exception):
    """Base class for errors surfaced to the user of the coverage finder."""


class MissingCredentialsError(CoverageFinderError):
    """An upstream API key or login is not configured."""


class UpstreamResponseError(CoverageFinderError):
    """An upstream API answered with a body we cannot use."""


class KeywordParseError(UpstreamResponseError):
    """The language model reply is not a JSON array of keywords."""


class EmptyDocumentError(CoverageFinderError):
    """No text could be extracted from the uploaded document."""


class ProviderHTTPError(CoverageFinderError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
