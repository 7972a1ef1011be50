"""
Toolkit Configuration
=====================

Settings shared by the command-line tool and the file-based operations.
Configuration comes from:
- Default values (defined here)
- Environment variables (``ToolConfig.from_env``)

Environment Variables
---------------------
    HP35S_ENCODING        File encoding (default: utf-8)
    HP35S_LOG_LEVEL       Log level when not verbose (default: WARNING)
    HP35S_SOURCE_SUFFIX   Suffix of internal program files (default: .35s)
    HP35S_EXPORT_SUFFIX   Suffix of exported exchange files (default: .txt)
"""

from dataclasses import dataclass
import codecs
import logging
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ToolConfig:
    """
    Configuration for toolkit file handling and logging.

    Attributes:
        encoding: Encoding for reading and writing program files
        log_level: Logging level name used unless --verbose is given
        source_suffix: Suffix of internal program files
        export_suffix: Suffix given to exported files by default
    """

    encoding: str = "utf-8"
    log_level: str = "WARNING"
    source_suffix: str = ".35s"
    export_suffix: str = ".txt"

    @classmethod
    def from_env(cls) -> "ToolConfig":
        """
        Create a ToolConfig from environment variables.

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if encoding := os.environ.get("HP35S_ENCODING"):
            try:
                codecs.lookup(encoding)
                config.encoding = encoding
            except LookupError:
                pass  # Unknown encoding, keep default

        if level := os.environ.get("HP35S_LOG_LEVEL"):
            if level.upper() in LOG_LEVELS:
                config.log_level = level.upper()

        if suffix := os.environ.get("HP35S_SOURCE_SUFFIX"):
            if suffix.startswith("."):
                config.source_suffix = suffix

        if suffix := os.environ.get("HP35S_EXPORT_SUFFIX"):
            if suffix.startswith("."):
                config.export_suffix = suffix

        return config

    @property
    def logging_level(self) -> int:
        """The configured level as a ``logging`` constant."""
        return getattr(logging, self.log_level)
