import logging
from typing import Iterable, Iterator

from .helpers import LF

_logger = logging.getLogger(__name__)


class BytesToLinesSource:
    """
    Buffered byte source built on top of an iterator of byte chunks.

    Chunks can be cut anywhere, even in the middle of a multibyte character.
    `readline()` returns everything up to and including the next LF,
    or the remaining tail at the end of chunks, or b'' when nothing is left.

    An exception from the chunks iterator propagates from `readline()`.
    Bytes of the unfinished line are kept: if the iterator delivers more
    chunks later, the line continues. If it ends right after the failure,
    the unfinished line is dropped and the end of input is reported.
    """

    def __init__(self, chunks: Iterable[bytes]):
        self._chunks: Iterator[bytes] = iter(chunks)
        self._buf = bytearray()
        self._eof = False
        self._failed = False

    def readline(self) -> bytes:
        while True:
            index = self._buf.find(LF)
            if index != -1:
                data = bytes(self._buf[:index + 1])
                self._buf[:index + 1] = b''
                return data

            if self._eof:
                data = bytes(self._buf)
                self._buf[:] = b''
                return data

            try:
                more_data = next(self._chunks)
            except StopIteration:
                self._eof = True
                if self._failed and self._buf:
                    _logger.debug("Chunks ended after a failure, dropping %d bytes of unfinished line",
                                  len(self._buf))
                    self._buf[:] = b''
                continue
            except Exception:
                self._failed = True
                raise
            self._failed = False
            if more_data:
                self._buf.extend(more_data)

    @property
    def exhausted(self) -> bool:
        return self._eof and not self._buf

    def __len__(self):
        return len(self._buf)
