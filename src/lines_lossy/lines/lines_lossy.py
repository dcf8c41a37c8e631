import logging
from typing import Iterator, Optional, Callable, Any

from ..common.config import Config
from ..common.helpers import LF, CR
from ..common.stream_line_reader import BytesToLinesSource
from ..common.stream_retreiver import retrieve_with_progress, ReadProgressInfo
from .decoding import decode_lossy_counted

_logger = logging.getLogger(__name__)


class LinesLossy:
    """
    Iterates lines of a buffered binary source, like iterating a text file,
    but invalid UTF-8 never fails a line: it is replaced with U+FFFD.

    The source is anything with `readline()` that returns bytes up to and including b'\\n',
    or b'' at the end: opened binary files, BytesIO, gzip files, socket.makefile('rb'),
    `BytesToLinesSource`.

    A trailing LF is stripped, then a CR that was right before it.
    A lone CR is ordinary content.

    Exceptions raised by the source propagate from `next()` unchanged.
    Nothing is lost in this object by such failure,
    so the next `next()` reads from the source again.
    """

    def __init__(self, source, log_replacements: bool = True):
        if not callable(getattr(source, 'readline', None)):
            raise TypeError(f"source must have readline() method, got {type(source).__name__}")
        self._source = source
        self._log_replacements = log_replacements
        self.lines_read = 0
        self.replaced_lines = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self._source.readline()
        if not isinstance(line, (bytes, bytearray)):
            raise TypeError(f"source must be opened in binary mode, readline() returned {type(line).__name__}")

        if not line:
            _logger.debug("End of %r: %d lines, %d with replacements",
                          self._source, self.lines_read, self.replaced_lines)
            raise StopIteration

        if line.endswith(LF):
            line = line[:-1]
            if line.endswith(CR):
                line = line[:-1]

        text, replaced = decode_lossy_counted(line)
        self.lines_read += 1
        if replaced:
            self.replaced_lines += 1
            if self._log_replacements:
                _logger.debug("Line %d: %d invalid UTF-8 sequence(s) replaced", self.lines_read, replaced)
        return text

    def __repr__(self):
        return (f"{self.__class__.__name__}(source={self._source!r}, "
                f"lines_read={self.lines_read}, replaced_lines={self.replaced_lines})")


def lines_lossy(source, config: Optional[Config] = None) -> LinesLossy:
    """Lossy lines of a buffered binary source. See `LinesLossy`."""
    if config is None:
        return LinesLossy(source)
    return LinesLossy(source, log_replacements=config.log_replacements)


def lines_lossy_from_stream(body_stream,
                            on_read_callback: Optional[Callable[[ReadProgressInfo], Any]] = None,
                            config: Optional[Config] = None) -> LinesLossy:
    """
    Lossy lines of a raw stream that has only `read(n)`, e.g. an HTTP response body.
    Reads chunks of `config.read_size` and reports progress to `on_read_callback`.

    A failing `read()` propagates from `next()` with the bytes of the unfinished line kept.
    The next pull calls `read()` again: if the stream recovers the line continues,
    if it reports the end instead the unfinished line is dropped.
    """
    config = config or Config()
    chunks = retrieve_with_progress(body_stream,
                                    on_read_callback,
                                    interval=config.progress_interval,
                                    read_size=config.read_size)
    return LinesLossy(BytesToLinesSource(chunks), log_replacements=config.log_replacements)
