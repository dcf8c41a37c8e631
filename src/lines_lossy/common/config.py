import configparser
import math
import os.path
from typing import Optional

from ..common.helpers import KB, is_positive

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(__file__), "default_config.ini")


class Config:
    """
    Reader settings kept in an ini file.

    Packaged defaults are read first, then `path` on top of them.
    `path` can be a file or a directory holding `config.ini`.
    """

    def __init__(self, path: Optional[str] = None):
        self._config_file: Optional[str] = None
        if path is not None:
            if os.path.isdir(path):
                self._config_file = os.path.join(path, 'config.ini')
            else:
                self._config_file = path

        self._config = configparser.ConfigParser()
        self._config.read(DEFAULT_CONFIG_FILE, encoding="utf-8")
        if self._config_file is not None:
            if not os.path.isfile(self._config_file):
                raise FileNotFoundError(self._config_file)
            self._config.read(self._config_file, encoding="utf-8")

        # Fail early on broken values
        _ = self.read_size_kb, self.progress_interval, self.log_replacements

    def get_config_file_location(self) -> Optional[str]:
        return self._config_file

    @property
    def read_size_kb(self) -> int:
        v = int(self._config['READER']['read_size_kb'])
        if not is_positive(v):
            raise ValueError(f"read_size_kb must be positive, got {v}")
        return v

    @read_size_kb.setter
    def read_size_kb(self, i: int):
        if not is_positive(i):
            raise ValueError(f"read_size_kb must be positive, got {i}")
        self._config['READER']['read_size_kb'] = str(i)

    @property
    def read_size(self) -> int:
        return self.read_size_kb * KB

    @property
    def progress_interval(self) -> float:
        v = float(self._config['READER']['progress_interval'])
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"progress_interval must be a finite non-negative number, got {v}")
        return v

    @progress_interval.setter
    def progress_interval(self, f: float):
        if not math.isfinite(f) or f < 0:
            raise ValueError(f"progress_interval must be a finite non-negative number, got {f}")
        self._config['READER']['progress_interval'] = str(f)

    @property
    def log_replacements(self) -> bool:
        return bool(int(self._config['READER']['log_replacements']) != 0)

    @log_replacements.setter
    def log_replacements(self, b: bool):
        self._config['READER']['log_replacements'] = "1" if b else "0"

    def save(self, path: Optional[str] = None):
        path = path or self._config_file
        if path is None:
            raise ValueError("No file to save config to")
        with open(path, "w", encoding="utf-8") as f:
            self._config.write(f)
