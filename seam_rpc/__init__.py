"""
Seam RPC: transport-agnostic JSON-RPC 2.0

One protocol core shared by two carriers:

1. Protocol core (seam_rpc.rpc): frame reader, message codec, method registry
   and dispatcher
2. Transports (seam_rpc.adapters):
   - stdio: newline-delimited frames over a persistent byte stream
   - http: one request per POST body (aiohttp)

Every processed payload produces exactly one response; protocol and handler
failures become JSON-RPC error responses, transport failures end the stream
or connection.
"""

__version__ = "0.1.0"
