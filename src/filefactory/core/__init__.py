"""
Core Layer - Selection model, metadata scanning, header layout, and configuration.
"""

from filefactory.core.config import (
    FileFactoryConfig,
    LoggingConfig,
    MergeConfig,
    ShellConfig,
    configure_logging,
    load_config,
)
from filefactory.core.file_list import FileListModel
from filefactory.core.header import HeaderRecord
from filefactory.core.line_hash_scanner import (
    FileMetadata,
    LineHashScanner,
    LineHashScannerInterface,
    ScanError,
)
from filefactory.core.path_utils import expand_leaves, walk_directory

__all__ = [
    # Config
    "FileFactoryConfig",
    "MergeConfig",
    "LoggingConfig",
    "ShellConfig",
    "configure_logging",
    "load_config",
    # Selection
    "FileListModel",
    # Scanner
    "FileMetadata",
    "LineHashScanner",
    "LineHashScannerInterface",
    "ScanError",
    # Headers
    "HeaderRecord",
    # Expansion
    "expand_leaves",
    "walk_directory",
]
