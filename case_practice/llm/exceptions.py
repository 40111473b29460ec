"""
Advisory Gateway Exceptions

Both failure kinds are recoverable: the SkillSession appends an error notice
and returns to ACTIVE so the user can resend.
"""

from enum import Enum
from typing import Optional


class GatewayErrorCode(str, Enum):
    TRANSPORT = "TRANSPORT"
    MALFORMED = "MALFORMED"


class AdvisoryGatewayError(Exception):
    """Base class for advisory request failures."""
    code: GatewayErrorCode


class AdvisoryTransportError(AdvisoryGatewayError):
    """Connection failure, timeout, or non-2xx response."""
    code = GatewayErrorCode.TRANSPORT

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AdvisoryMalformedError(AdvisoryGatewayError):
    """The reply arrived but does not have a recognised shape."""
    code = GatewayErrorCode.MALFORMED

    def __init__(self, message: str, raw_preview: str = ""):
        super().__init__(message)
        self.raw_preview = raw_preview
