"""
Stdio Adapter Package

Implements JSON-RPC 2.0 over newline-delimited frames on a pair of byte
streams, typically a process's stdin and stdout.
"""

from seam_rpc.adapters.stdio.client import StdioClient
from seam_rpc.adapters.stdio.server import StdioServer

__all__ = ["StdioClient", "StdioServer"]
