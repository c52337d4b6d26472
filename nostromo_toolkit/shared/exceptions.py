"""
Exception hierarchy for the Nostromo toolkit.

Two roots tell callers whether trying again can help:
- RetryableException: the chain read behind a lookup failed (node timeout,
  rate limit); the same call may succeed later
- NonRetryableException: the input itself is unusable (bad settings,
  incomplete contract record)

Concrete exceptions:
- ConfigurationException -> NonRetryableException
- FundraisingDataException -> NonRetryableException
- CampaignLookupException -> RetryableException

Lookup functions injected into the index resolver are never wrapped: their
errors reach the caller unchanged. Only the bundled scanning lookup raises
CampaignLookupException.
"""


class RetryableException(Exception):
    """
    Base class for failures of chain reads that may succeed on a later call.

    Attributes:
        message: Human readable description
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NonRetryableException(Exception):
    """
    Base class for failures caused by unusable input.

    Attributes:
        message: Human readable description
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationException(NonRetryableException):
    """Raised when a NOSTROMO_* setting cannot be parsed."""


class FundraisingDataException(NonRetryableException):
    """
    Raised when a decoded campaign or project record lacks a required field.

    The message names the record index and the missing field, e.g.
    ``Campaign record 5 is missing field requiredFunds``.
    """


class CampaignLookupException(RetryableException):
    """
    Raised by the scanning lookup when the campaign count cannot be read.

    The original error is chained as ``__cause__``.
    """
