"""
Centralized services container module for FileFactory.

Provides a shared container for the services used by the one-shot CLI and
the interactive shell, so both build them from configuration the same way.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from filefactory.core.config import FileFactoryConfig, load_config
from filefactory.core.file_list import FileListModel
from filefactory.core.line_hash_scanner import LineHashScanner
from filefactory.services.merge_engine import MergeEngine


@dataclass
class ServicesContainer:
    """
    Container holding all shared service instances.

    Attributes:
        config: Application configuration
        scanner: Line count and MD5 scanner
        merge_engine: Engine that writes merged output
        file_list: Current selection, shared by shell commands
    """

    config: FileFactoryConfig
    scanner: LineHashScanner
    merge_engine: MergeEngine
    file_list: FileListModel = field(default_factory=FileListModel)


def create_services(
    config_path: Optional[Path] = None,
    config: Optional[FileFactoryConfig] = None,
) -> ServicesContainer:
    """
    Create and initialize all services.

    Args:
        config_path: Optional path to configuration file. If None, uses
                    environment variables and defaults.
        config: Already loaded configuration; takes precedence over
                config_path.

    Returns:
        ServicesContainer with all initialized services.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ValueError: If the configuration is invalid.
    """
    config = config or load_config(config_path)

    scanner = LineHashScanner(chunk_size=config.merge.chunk_size)
    merge_engine = MergeEngine.from_config(config.merge, scanner=scanner)

    return ServicesContainer(
        config=config,
        scanner=scanner,
        merge_engine=merge_engine,
    )
