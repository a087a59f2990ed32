"""Error kinds raised by the analysis pipeline."""


class PipelineError(RuntimeError):
    """Base class for failures that abort a report request."""


class ValidationError(PipelineError):
    """Raised when the request input is missing or malformed."""


class NotFound(PipelineError):
    """Raised when a directory lookup yields no result."""


class UpstreamUnavailable(PipelineError):
    """Raised when an external service call fails or returns an unusable payload."""


class Unauthorized(PipelineError):
    """Raised when a request does not carry the configured shared secret."""
