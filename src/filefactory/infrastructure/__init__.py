"""
Infrastructure Layer - Test doubles for the scanner and progress reporter.
"""

from filefactory.infrastructure.fakes import (
    FaultyScanner,
    RecordingProgressReporter,
)

__all__ = [
    "FaultyScanner",
    "RecordingProgressReporter",
]
