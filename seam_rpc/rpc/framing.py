"""
Newline frame reader

Turns an unbounded byte stream delivered in arbitrary chunks into a lazy,
single-pass sequence of payload strings, one per `\\n`-terminated line.
"""

import codecs
import logging
from typing import AsyncIterator

from seam_rpc.rpc.errors import TransportError
from seam_rpc.utils.streams import ByteSource

logger = logging.getLogger(__name__)

DELIMITER = "\n"
DEFAULT_CHUNK_SIZE = 1024


async def read_frames(source: ByteSource, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[str]:
    """Yield payloads from a byte source until end of input

    Empty lines are yielded as empty strings. A trailing payload without a
    delimiter is yielded once at EOF.

    Args:
        source: Object with an awaitable ``read(n)`` returning ``b""`` at EOF
        chunk_size: Maximum number of bytes requested per read

    Raises:
        TransportError: The underlying stream failed
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    buffer = ""

    while True:
        try:
            chunk = await source.read(chunk_size)
        except (OSError, EOFError) as e:
            logger.error(f"Read from byte stream failed: {str(e)}")
            raise TransportError(f"Stream read failed: {str(e)}") from e

        if not chunk:
            break

        buffer += decoder.decode(chunk)
        *lines, buffer = buffer.split(DELIMITER)
        for line in lines:
            yield line

    buffer += decoder.decode(b"", final=True)
    if buffer:
        yield buffer


def encode_frame(payload: str) -> bytes:
    """Serialize one payload as a delimited UTF-8 frame"""
    return (payload + DELIMITER).encode("utf-8")
