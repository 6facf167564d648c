"""Line-oriented Terraform scanning and reference extraction."""

from .references import extract_references, parse_depends_on
from .scanner import HCLScanner, find_block_end, scan, scan_text

__all__ = [
    "HCLScanner",
    "extract_references",
    "find_block_end",
    "parse_depends_on",
    "scan",
    "scan_text",
]
