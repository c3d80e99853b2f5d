"""Error taxonomy for completion suggester calls.

Every failure surfaces to the caller; nothing here is retried.
"""


class CompletionError(Exception):
    """Base class for all completion suggester failures"""


class CompletionConnectionError(CompletionError):
    """The connection could not be established, used or released"""


class CompletionTransportError(CompletionError):
    """Network failure, timeout or endpoint-side error during a request"""


class CompletionRequestError(CompletionError):
    """The request is malformed, locally or as judged by the endpoint"""


class ResponseParseError(CompletionError):
    """The payload lacks the expected suggestion structure"""
