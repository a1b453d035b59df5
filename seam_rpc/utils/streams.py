"""
Byte stream primitives

The protocol core only needs a readable source and a writable sink.
asyncio.StreamReader/StreamWriter (sockets, subprocess pipes) already fit;
the wrappers here adapt the process's blocking stdin/stdout.
"""

import asyncio
import sys
from typing import BinaryIO, Protocol


class ByteSource(Protocol):
    async def read(self, n: int = -1) -> bytes:
        ...


class ByteSink(Protocol):
    def write(self, data: bytes) -> None:
        ...

    async def drain(self) -> None:
        ...


class BlockingByteSource:
    """Reads a blocking binary stream without stalling the event loop"""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    async def read(self, n: int = -1) -> bytes:
        read = getattr(self.stream, "read1", self.stream.read)
        return await asyncio.to_thread(read, n)


class BlockingByteSink:
    """Buffers writes to a blocking binary stream, flushing on drain"""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write(self, data: bytes) -> None:
        self.stream.write(data)

    async def drain(self) -> None:
        await asyncio.to_thread(self.stream.flush)


def open_stdio():
    """Return a (source, sink) pair bound to this process's stdin and stdout"""
    return BlockingByteSource(sys.stdin.buffer), BlockingByteSink(sys.stdout.buffer)
