"""
Transport Adapters Module

Adapter implementations providing unified interfaces for different carriers:
- stdio: newline-delimited frames over a pair of byte streams
- http: one request per POST body (aiohttp)

Both adapters drive the same protocol core and produce identical responses
for identical payloads.
"""

from .adapter_factory import AdapterFactory, AdapterType
from .adapter_interface import ClientAdapterInterface, ServerAdapterInterface

__all__ = [
    "AdapterFactory",
    "AdapterType",
    "ClientAdapterInterface",
    "ServerAdapterInterface"
]
