import gzip
import os
from typing import Iterator, Optional, Union

from ..common.config import Config
from .lines_lossy import lines_lossy


def open_lines_lossy(file: Union[str, os.PathLike], config: Optional[Config] = None) -> Iterator[str]:
    """
    Yields lossy lines of a file.
    If file ends with .gz then opens it as gzip.
    The file is closed when iteration finishes or the generator is closed.
    """
    file = os.fspath(file)
    open_ = gzip.open if file.endswith(".gz") else open
    with open_(file, mode='rb') as f:
        yield from lines_lossy(f, config)
