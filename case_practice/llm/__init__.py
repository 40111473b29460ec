"""
Advisory Gateway - Port and Adapters for the Remote Advisory Service
"""

from case_practice.llm.exceptions import (
    AdvisoryGatewayError,
    AdvisoryMalformedError,
    AdvisoryTransportError,
    GatewayErrorCode,
)
from case_practice.llm.interface import AdvisoryGateway

__all__ = [
    "AdvisoryGateway",
    "AdvisoryGatewayError",
    "AdvisoryMalformedError",
    "AdvisoryTransportError",
    "GatewayErrorCode",
]
