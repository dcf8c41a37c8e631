# tests/test_stream_line_reader.py
import pytest

from lines_lossy import BytesToLinesSource, LinesLossy


def _readlines(source: BytesToLinesSource):
    lines = []
    while True:
        line = source.readline()
        if not line:
            return lines
        lines.append(line)


# -----------------------------------------------------------------------------
# readline()
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("chunks", [
    [b"ab\ncd\r\nef"],
    [b"a", b"b\nc", b"d\r", b"\nef"],
    [b"ab\n", b"", b"cd\r\n", b"", b"ef"],
    [bytes([b]) for b in b"ab\ncd\r\nef"],
])
def test_lines_do_not_depend_on_chunking(chunks):
    assert _readlines(BytesToLinesSource(chunks)) == [b"ab\n", b"cd\r\n", b"ef"]


def test_no_chunks_is_empty():
    source = BytesToLinesSource([])
    assert source.readline() == b""
    assert source.exhausted


def test_buffers_only_unfinished_line():
    source = BytesToLinesSource(iter([b"one\ntw", b"o\nthr"]))

    assert source.readline() == b"one\n"
    assert len(source) == 2
    assert source.readline() == b"two\n"
    assert len(source) == 0
    assert not source.exhausted
    assert source.readline() == b"thr"
    assert source.exhausted
    assert source.readline() == b""


def test_returns_bytes_not_bytearray():
    line = BytesToLinesSource([b"x\n"]).readline()
    assert type(line) is bytes


class _FlakyChunks:
    """Iterator of chunks that raises OSError on the chosen calls and goes on after."""

    def __init__(self, chunks, fail_on=()):
        self._chunks = list(chunks)
        self._fail_on = set(fail_on)
        self.calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.calls += 1
        if self.calls in self._fail_on:
            raise OSError("connection reset")
        if not self._chunks:
            raise StopIteration
        return self._chunks.pop(0)


def test_chunk_error_propagates_and_unfinished_line_is_dropped():
    def chunks():
        yield b"first\nsec"
        raise OSError("connection reset")

    source = BytesToLinesSource(chunks())
    assert source.readline() == b"first\n"
    with pytest.raises(OSError, match="connection reset"):
        source.readline()

    # The generator is finished, "sec" must not come out as a line
    assert source.readline() == b""
    assert source.exhausted
    assert source.readline() == b""


def test_unfinished_line_continues_after_recovery():
    source = BytesToLinesSource(_FlakyChunks([b"first\nsec", b"ond\n", b"third"], fail_on=(2,)))

    assert source.readline() == b"first\n"
    with pytest.raises(OSError):
        source.readline()
    assert len(source) == 3
    assert source.readline() == b"second\n"
    assert source.readline() == b"third"
    assert source.readline() == b""


def test_repeated_failures_keep_the_line():
    source = BytesToLinesSource(_FlakyChunks([b"a", b"b\n"], fail_on=(2, 3)))

    for _ in range(2):
        with pytest.raises(OSError):
            source.readline()
    assert source.readline() == b"ab\n"


# -----------------------------------------------------------------------------
# With LinesLossy
# -----------------------------------------------------------------------------

def test_character_split_between_chunks():
    source = BytesToLinesSource([b"cost: 5\xe2\x82", b"\xac\r", b"\nnext\xff"])
    assert list(LinesLossy(source)) == ["cost: 5€", "next\ufffd"]
