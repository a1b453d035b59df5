"""
HTTP Adapter Package

Implements JSON-RPC 2.0 over HTTP POST using aiohttp for both the server and
the client side.
"""

from seam_rpc.adapters.http.client import HttpClient
from seam_rpc.adapters.http.server import HttpServer

__all__ = ["HttpClient", "HttpServer"]
