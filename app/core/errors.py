class InsightError(Exception):
    """Base for failures between a prompt and a usable record."""


class TransportError(InsightError):
    """The model endpoint could not be reached."""


class ModelError(InsightError):
    """The endpoint answered with an error or with nothing usable."""


class ParseError(InsightError):
    """The reply did not match the expected positional schema."""
