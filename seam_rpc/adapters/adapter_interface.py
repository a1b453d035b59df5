"""
Transport adapter interfaces

Every transport (stdio, HTTP) implements these interfaces so application code
calling RPC methods does not change when the carrier does.
"""

import abc
from typing import Any

from seam_rpc.rpc.errors import RemoteCallError
from seam_rpc.rpc.messages import Response

class ClientAdapterInterface(abc.ABC):
    """Client adapter interface, methods all client adapters must implement"""

    @abc.abstractmethod
    async def request(self, method: str, params: Any = None) -> Response:
        """Send one RPC request and wait for its response

        Args:
            method: Method name to call
            params: Method parameters

        Returns:
            Response: The decoded response, result or error

        Raises:
            TransportError: The stream or connection failed
            InvalidResponseError: The reply is not a valid response
        """
        pass

    async def call(self, method: str, params: Any = None) -> Any:
        """Call a method and return its result

        Raises:
            RemoteCallError: The peer answered with an error response
        """
        response = await self.request(method, params)
        if response.error is not None:
            raise RemoteCallError(response.error.code, response.error.message, response.error.data)
        return response.result

    @abc.abstractmethod
    async def close(self) -> None:
        """Close the connection and release resources"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

class ServerAdapterInterface(abc.ABC):
    """Server adapter interface, methods all server adapters must implement"""

    @abc.abstractmethod
    async def serve(self):
        """Serve requests until the input ends or stop() is called"""
        pass

    @abc.abstractmethod
    async def stop(self):
        """Stop the server"""
        pass
