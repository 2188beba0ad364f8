"""
Per-file header blocks written ahead of each source in a merged output.

Layout (one field per line, followed by a blank line)::

    /*
    时间：<timestamp>
    原文件路径：<path>
    MD5：<digest>
    行数：<line count>
    */

When metadata could not be read, the MD5 and line-count lines are replaced
by a single ``元数据获取失败：<reason>`` line.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

HEADER_OPEN = "/*"
HEADER_CLOSE = "*/"
TIMESTAMP_LABEL = "时间："
PATH_LABEL = "原文件路径："
MD5_LABEL = "MD5："
LINES_LABEL = "行数："
FAILURE_LABEL = "元数据获取失败："

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class HeaderRecord:
    """
    Metadata describing one source file in the merged output.

    Exactly one of (md5 and line_count) or failure_reason is expected
    to be set.
    """

    timestamp: datetime
    path: str
    md5: Optional[str] = None
    line_count: Optional[int] = None
    failure_reason: Optional[str] = None

    @property
    def is_degraded(self) -> bool:
        return self.failure_reason is not None

    def lines(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> list[str]:
        """Return the header block as text lines without terminators."""
        lines = [
            HEADER_OPEN,
            f"{TIMESTAMP_LABEL}{self.timestamp.strftime(timestamp_format)}",
            f"{PATH_LABEL}{self.path}",
        ]
        if self.failure_reason is not None:
            lines.append(f"{FAILURE_LABEL}{self.failure_reason}")
        else:
            lines.append(f"{MD5_LABEL}{self.md5}")
            lines.append(f"{LINES_LABEL}{self.line_count}")
        lines.append(HEADER_CLOSE)
        lines.append("")
        return lines

    def render(
        self,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        newline: str = "\n",
    ) -> bytes:
        """Serialize the header block to UTF-8, every line terminated."""
        return "".join(line + newline for line in self.lines(timestamp_format)).encode("utf-8")
