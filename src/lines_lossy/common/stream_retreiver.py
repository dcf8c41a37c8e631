from datetime import datetime
from typing import Any, Optional, Callable, Union, NamedTuple

from .helpers import KB


class ReadProgressInfo(NamedTuple):
    read: int
    total_read: int


class StreamChunksIterator:
    """
    Sequentially reads body_stream until it returns b''.
    Each `interval` of seconds calls `on_read_callback(ReadProgressInfo)`.

    Every pull calls `body_stream.read()` once.
    An exception from `read()` propagates, and the next pull calls `read()` again,
    so a stream that recovers keeps being read.
    """

    def __init__(self, body_stream,
                 on_read_callback: Optional[Callable[[ReadProgressInfo], Any]] = None,
                 interval: Union[int, float] = 0.2,
                 read_size: int = 512*KB):
        if read_size <= 0:
            raise ValueError(read_size)
        self._body_stream = body_stream
        self._callback = on_read_callback
        self._interval = interval
        self._read_size = read_size
        self._started = False
        self._finished = False
        self._last_progress = datetime.now()
        self.total_read = 0

    def __iter__(self):
        return self

    def __next__(self) -> bytes:
        if self._finished:
            raise StopIteration

        if not self._started:
            self._started = True
            self._last_progress = datetime.now()
            if self._callback:
                self._callback(ReadProgressInfo(0, 0))

        chunk = self._body_stream.read(self._read_size)
        if not chunk:
            self._finished = True
            if self._callback:
                self._callback(ReadProgressInfo(0, self.total_read))
            raise StopIteration

        self.total_read += len(chunk)
        if self._callback:
            now = datetime.now()
            if (now - self._last_progress).total_seconds() > self._interval:
                self._callback(ReadProgressInfo(len(chunk), self.total_read))
                self._last_progress = now
        return chunk


def retrieve_with_progress(body_stream,
                           on_read_callback: Optional[Callable[[ReadProgressInfo], Any]] = None,
                           interval: Union[int, float] = 0.2,
                           read_size: int = 512*KB) -> StreamChunksIterator:
    """
    Iterator of non-empty chunks of body_stream.
    :param body_stream: Stream to read. Anything with `read(n)` returning bytes.
    :param on_read_callback: Called once before reading, periodically while reading, and once at the end.
    :param interval: Min interval between progress callbacks.
    :param read_size: Size of a read iteration
    """
    return StreamChunksIterator(body_stream, on_read_callback, interval, read_size)
