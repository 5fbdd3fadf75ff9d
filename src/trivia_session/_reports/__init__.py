# Area: Reports
"""
Read-only reporting over a session.

This package contains:
- Serializable session snapshots
- The plain-text summary report
"""

from .snapshot import build_session_snapshot
from .summary import build_summary_text, write_summary_report

__all__ = [
    "build_session_snapshot",
    "build_summary_text",
    "write_summary_report",
]
