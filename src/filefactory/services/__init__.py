"""
Service Layer - MergeEngine, progress reporting, and ServicesContainer.
"""

from filefactory.services.container import ServicesContainer, create_services
from filefactory.services.merge_engine import MergeEngine
from filefactory.services.merge_models import (
    MergeError,
    MergeJob,
    MergeResult,
    OutputOpenError,
    OutputWriteError,
    SourceReadError,
)
from filefactory.services.progress import (
    LoggingProgressReporter,
    NullProgressReporter,
    ProgressReporter,
)

__all__ = [
    # Container and factory
    "ServicesContainer",
    "create_services",
    # Merge
    "MergeEngine",
    "MergeJob",
    "MergeResult",
    # Errors
    "MergeError",
    "OutputOpenError",
    "OutputWriteError",
    "SourceReadError",
    # Progress
    "ProgressReporter",
    "NullProgressReporter",
    "LoggingProgressReporter",
]
