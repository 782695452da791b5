"""Failures of the content generator boundary.

Nothing here is retried automatically: every failure is reported once and the
caller decides whether to invoke the operation again.
"""


class GenerationFailure(Exception):
    """A generation call did not produce a usable result."""


class MissingCredential(GenerationFailure):
    """No API key is configured for the content generator."""


class TransportFailure(GenerationFailure):
    """Network or HTTP level failure talking to the content generator."""


class MalformedResponse(GenerationFailure):
    """The reply could not be parsed into the expected structure."""


__all__ = ['GenerationFailure', 'MissingCredential', 'TransportFailure', 'MalformedResponse']
