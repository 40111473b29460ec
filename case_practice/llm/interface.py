from abc import ABC, abstractmethod

from ..schemas.advisory import AdvisoryRequest


class AdvisoryGateway(ABC):
    """
    Abstract Base Class interface that defines the contract for any advisory
    backend (the hosted proxy, OpenAI directly, a local model, etc.)
    """

    @abstractmethod
    async def ask(self, request: AdvisoryRequest) -> str:
        """
        Sends the request and returns the reply text.

        Raises:
            AdvisoryTransportError: the request did not complete successfully.
            AdvisoryMalformedError: the reply could not be understood.
        """
        pass
