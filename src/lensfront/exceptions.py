"""Custom exceptions for lensfront."""


class LensfrontError(Exception):
    """Base exception for lensfront operations."""


class FetchError(LensfrontError):
    """Error while fetching content from the CMS."""


class ContentNotFoundError(FetchError):
    """Requested CMS record or collection does not exist."""


class RateLimitError(FetchError):
    """Rate limited by the CMS."""


class ContentValidationError(LensfrontError):
    """CMS payload does not match the expected content model."""


class UnrenderableContent(LensfrontError):
    """A rich-text node could not be converted.

    Raised inside the renderer only; ``render`` always recovers it into a
    fallback view.
    """
