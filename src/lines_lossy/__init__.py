__version__ = "2026.10a1"

from .common.config import Config
from .common.stream_line_reader import BytesToLinesSource
from .common.stream_retreiver import retrieve_with_progress, ReadProgressInfo, StreamChunksIterator
from .lines.decoding import decode_lossy, decode_lossy_counted, count_replacements, REPLACEMENT_CHARACTER
from .lines.files import open_lines_lossy
from .lines.lines_lossy import LinesLossy, lines_lossy, lines_lossy_from_stream
