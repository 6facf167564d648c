"""
Line-oriented Terraform Block Scanner.

Recognizes `resource` and `module` blocks and the flat `name = value`
assignments inside them. This is not an HCL grammar: anything
that does not match one of the patterns below is ignored, and the scanner
never raises.

Known limitation: block ends are found by counting `{` and `}` characters,
so braces inside strings, heredocs or comments shift the computed end line
and with it the range of lines read as attributes.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from ..config import MAX_LINE_LENGTH, required_attributes_for
from ..core.types import Attribute, ModuleBlock, ResourceBlock, ScanResult
from .references import extract_references, parse_depends_on

logger = logging.getLogger(__name__)


@dataclass
class _BlockDraft:
    """Mutable accumulator for a block while its lines are being read."""

    name: str
    line_start: int
    line_end: int
    type: Optional[str] = None  # None for modules
    source: str = ""
    attributes: List[Attribute] = field(default_factory=list)
    depends_on: List[str] = field(default_factory=list)
    references: List[str] = field(default_factory=list)

    @property
    def is_module(self) -> bool:
        return self.type is None

    def add_references(self, refs: Iterable[str]) -> None:
        for ref in refs:
            if ref not in self.references:
                self.references.append(ref)


def find_block_end(lines: Sequence[str], line_start: int) -> int:
    """
    Locate the closing line of the block opened at `line_start` (1-based).

    Counts brace characters from the opening line onwards and returns the
    first line holding a `}` that brings the depth back to zero. Falls back
    to the last line number when the input ends first.
    """
    depth = 0
    opened = False

    for idx in range(max(line_start - 1, 0), len(lines)):
        line = lines[idx]
        opens = line.count("{")
        closes = line.count("}")

        if opens:
            opened = True
            depth += opens
        if closes:
            depth -= closes
            if opened and depth <= 0:
                return idx + 1

    return len(lines)


class HCLScanner:
    """
    Scanner for Terraform configuration text.

    One instance may be reused; `scan` keeps all of its state local.
    """

    RESOURCE_PATTERN = re.compile(r'resource\s+"([^"]+)"\s+"([^"]+)"')
    MODULE_PATTERN = re.compile(r'module\s+"([^"]+)"')
    ATTRIBUTE_PATTERN = re.compile(r"^\w+\s*=")
    SOURCE_PATTERN = re.compile(r'source\s*=\s*"([^"]+)"')

    def scan(self, lines: Sequence[str]) -> ScanResult:
        """Scan a sequence of lines into resources, modules and issues."""
        lines = list(lines)
        drafts: List[_BlockDraft] = []
        current: Optional[_BlockDraft] = None

        for index, raw in enumerate(lines):
            line_number = index + 1

            # Attributes are only read while the block is open
            if current is not None and line_number > current.line_end:
                current = None

            if len(raw) > MAX_LINE_LENGTH:
                logger.debug(f"Skipping line {line_number}: longer than {MAX_LINE_LENGTH} chars")
                continue

            line = raw.strip()
            if not line:
                continue

            if line.startswith("resource "):
                match = self.RESOURCE_PATTERN.match(line)
                if match:
                    current = _BlockDraft(
                        type=match.group(1),
                        name=match.group(2),
                        line_start=line_number,
                        line_end=find_block_end(lines, line_number),
                    )
                    drafts.append(current)
                    logger.debug(f"Found resource {match.group(1)}.{match.group(2)} at line {line_number}")
            elif line.startswith("module "):
                match = self.MODULE_PATTERN.match(line)
                if match:
                    current = _BlockDraft(
                        name=match.group(1),
                        line_start=line_number,
                        line_end=find_block_end(lines, line_number),
                    )
                    drafts.append(current)
                    logger.debug(f"Found module {match.group(1)} at line {line_number}")
            elif current is not None and self.ATTRIBUTE_PATTERN.match(line):
                self._read_attribute(current, line)

        resources: List[ResourceBlock] = []
        modules: List[ModuleBlock] = []
        for draft in drafts:
            block = self._finalize(draft)
            if isinstance(block, ModuleBlock):
                modules.append(block)
            else:
                resources.append(block)

        issues = check_required_attributes(resources)

        logger.debug(
            f"Scanned {len(lines)} lines: {len(resources)} resources, "
            f"{len(modules)} modules, {len(issues)} issues"
        )
        return ScanResult(resources=resources, modules=modules, issues=issues)

    def scan_text(self, text: str) -> ScanResult:
        """Scan newline-separated configuration text."""
        return self.scan(text.split("\n"))

    def _read_attribute(self, block: _BlockDraft, line: str) -> None:
        name, _, value = line.partition("=")
        name = name.strip()
        value = value.strip()

        if name == "depends_on":
            block.depends_on.extend(parse_depends_on(value))

        block.add_references(extract_references(value))
        block.attributes.append(Attribute(name=name, value=value))

        if block.is_module and name == "source":
            match = self.SOURCE_PATTERN.match(line)
            if match:
                block.source = match.group(1)

    @staticmethod
    def _finalize(draft: _BlockDraft) -> Union[ResourceBlock, ModuleBlock]:
        common = dict(
            name=draft.name,
            line_start=draft.line_start,
            line_end=draft.line_end,
            attributes=draft.attributes,
            depends_on=draft.depends_on,
            references=draft.references,
        )
        if draft.is_module:
            return ModuleBlock(source=draft.source, **common)
        return ResourceBlock(type=draft.type, **common)


def check_required_attributes(resources: Iterable[ResourceBlock]) -> List[str]:
    """Return one advisory per required attribute missing from a resource."""
    issues: List[str] = []
    for resource in resources:
        for attr in required_attributes_for(resource.type):
            if not resource.has_attribute(attr):
                issues.append(
                    f'Missing required attribute "{attr}" for {resource.id} at line {resource.line_start}'
                )
    return issues


def scan(lines: Sequence[str]) -> ScanResult:
    """Scan a sequence of lines with a default scanner."""
    return HCLScanner().scan(lines)


def scan_text(text: str) -> ScanResult:
    """Scan configuration text with a default scanner."""
    return HCLScanner().scan_text(text)
