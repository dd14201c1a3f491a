"""
Reading the full contents of a binary stream.

A stream is classified once in to one of three source shapes, and each shape is read the cheapest way it allows:
    BufferSource    an in-memory io.BytesIO, its value is returned directly.
    SeekableSource  a seekable stream with a known remaining length, read in to a buffer of exactly that size.
    StreamSource    anything else, read in CHUNK_SIZE pieces until exhausted.
"""
import io
from collections import namedtuple
from lessvfs import InvalidArgument

CHUNK_SIZE = 0x1000


class BufferSource(namedtuple('BufferSource', ['buffer'])):
    """
    In-memory buffer source.
    """
    pass


class SeekableSource(namedtuple('SeekableSource', ['stream', 'length'])):
    """
    Seekable stream source, with the number of bytes remaining from the streams current position.
    """
    pass


class StreamSource(namedtuple('StreamSource', ['stream'])):
    """
    Non-seekable stream source of unknown length.
    """
    pass


def classify(stream):
    """
    Get the source shape for a stream.

    :param stream: Binary stream to classify.
    :type stream: io.IOBase
    :rtype: BufferSource | SeekableSource | StreamSource
    :raises lessvfs.InvalidArgument: If stream is None.
    """
    if stream is None:
        raise InvalidArgument('Stream may not be None')
    if isinstance(stream, io.BytesIO):
        return BufferSource(stream)
    if stream.seekable():
        position = stream.tell()
        length = stream.seek(0, io.SEEK_END) - position
        stream.seek(position)
        return SeekableSource(stream, length)
    return StreamSource(stream)


def read_bytes(source):
    """
    Read all bytes from a classified source.

    :param source: Source from classify().
    :type source: BufferSource | SeekableSource | StreamSource
    :rtype: bytes
    """
    if isinstance(source, BufferSource):
        return source.buffer.getvalue()

    if isinstance(source, SeekableSource):
        content = bytearray(source.length)
        filled = source.stream.readinto(content) or 0
        # Short reads are topped up, a stream that ends early is truncated to what it gave.
        while filled < source.length:
            chunk = source.stream.read(source.length - filled)
            if not chunk:
                del content[filled:]
                break
            content[filled:filled + len(chunk)] = chunk
            filled += len(chunk)
        return bytes(content)

    if isinstance(source, StreamSource):
        content = bytearray()
        while True:
            chunk = source.stream.read(CHUNK_SIZE)
            if not chunk:
                break
            content += chunk
        return bytes(content)

    raise TypeError('Unknown source shape: {0!r}'.format(type(source).__name__))


def get_bytes(stream):
    """
    Read all bytes from a stream.

    :type stream: io.IOBase
    :rtype: bytes
    """
    return read_bytes(classify(stream))
