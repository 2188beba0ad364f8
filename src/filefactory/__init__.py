"""
FileFactory - merge files and directories into one output with per-file headers.
"""

__version__ = "0.1.0"
