"""
Input adapters feeding the hex-escape encoder.

Files named with -D (and assembled code) are rendered to ASCII hex before
they reach the encoder, so every byte shows up in the output. Standard
input and -f files are handed over verbatim: they are expected to already
hold hex text (a pasted hexdump, a saved 'xxd -p' output) and the encoder
filters out whatever is not a hex digit.
"""
import sys
from typing import BinaryIO, Optional, TextIO

from errors import AllocationError, InputFileError

CHUNK_SIZE = 4096
INTERACTIVE_PROMPT = "[+] Hit CTRL-D twice to terminate input."


def render_hex(data: bytes) -> bytes:
    """Two lowercase ASCII hex digits per input byte."""
    try:
        return data.hex().encode("ascii")
    except MemoryError as e:
        raise AllocationError(len(data) * 2) from e


def _read_all(f: BinaryIO) -> bytes:
    buf = bytearray()
    try:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            buf += chunk
    except MemoryError as e:
        raise AllocationError(len(buf) + CHUNK_SIZE) from e
    return bytes(buf)


def _open(filename: str) -> BinaryIO:
    try:
        return open(filename, "rb")
    except OSError as e:
        raise InputFileError(filename) from e


def read_file_verbatim(filename: str) -> bytes:
    with _open(filename) as f:
        return _read_all(f)


def read_file_as_hex(filename: str) -> bytes:
    return render_hex(read_file_verbatim(filename))


def dump_file_hex(filename: str, out: Optional[TextIO] = None) -> int:
    """
    Writes the file content as lowercase hex digits straight to 'out'
    (stdout by default), without a trailing newline.
    Returns the number of bytes dumped.
    """
    if out is None:
        out = sys.stdout
    total = 0
    with _open(filename) as f:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            out.write(chunk.hex())
            total += len(chunk)
    out.flush()
    return total


def read_stream(stream: Optional[BinaryIO] = None,
                interactive: bool = False,
                prompt_out: Optional[TextIO] = None) -> bytes:
    """Reads standard input (or 'stream') until end of stream, verbatim."""
    if stream is None:
        stream = sys.stdin.buffer
    if interactive:
        if prompt_out is None:
            prompt_out = sys.stdout
        print(INTERACTIVE_PROMPT, file=prompt_out, flush=True)
    return _read_all(stream)
