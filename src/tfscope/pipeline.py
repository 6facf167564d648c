"""
Analysis Pipeline.

Runs the whole text -> blocks -> graph -> impact index chain in one call.
Callers that re-analyze the same document repeatedly (an editor, a file
watcher) keep an AnalysisSession and pass text to it; the session compares
content fingerprints and skips recomputation for unchanged text. There is
no module-level session: the caller owns it.
"""

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from .analysis.graph_builder import build_graph
from .analysis.impact import ImpactAnalyzer
from .core.graph import DependencyGraph
from .core.types import Edge, Node, ScanResult
from .parsing.scanner import HCLScanner

logger = logging.getLogger(__name__)


def content_fingerprint(text: str) -> str:
    """Stable fingerprint of a configuration text."""
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()


@dataclass
class PipelineResult:
    """Output of one pipeline run."""

    fingerprint: str
    scan: ScanResult
    graph: DependencyGraph
    impact: ImpactAnalyzer = field(repr=False)

    @property
    def nodes(self) -> List[Node]:
        return self.graph.nodes

    @property
    def edges(self) -> List[Edge]:
        return self.graph.edges

    @property
    def issues(self) -> List[str]:
        return self.scan.issues

    def impact_set(self, node_id: str) -> Set[str]:
        return self.impact.impact_set(node_id)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view; every collection is in a deterministic order."""
        return {
            "fingerprint": self.fingerprint,
            "resources": [r.model_dump(mode="json") for r in self.scan.resources],
            "modules": [m.model_dump(mode="json") for m in self.scan.modules],
            "issues": list(self.scan.issues),
            "nodes": [n.model_dump(mode="json") for n in self.graph.nodes],
            "edges": [e.model_dump(mode="json") for e in self.graph.edges],
            "impact": {node_id: sorted(ids) for node_id, ids in sorted(self.impact.index.items())},
        }


def run_pipeline(text: str, scanner: Optional[HCLScanner] = None) -> PipelineResult:
    """Analyze one configuration text from scratch."""
    scanner = scanner or HCLScanner()
    scan = scanner.scan_text(text)
    graph = build_graph(scan.resources, scan.modules)
    impact = ImpactAnalyzer(graph)

    return PipelineResult(
        fingerprint=content_fingerprint(text),
        scan=scan,
        graph=graph,
        impact=impact,
    )


class AnalysisSession:
    """
    Caller-owned cache of the last analysis.

    Holds the fingerprint of the last text analyzed and its result.
    """

    def __init__(self, scanner: Optional[HCLScanner] = None):
        self.scanner = scanner or HCLScanner()
        self.last_fingerprint: Optional[str] = None
        self.last_result: Optional[PipelineResult] = None
        self.runs = 0

    def is_stale(self, text: str) -> bool:
        return self.last_fingerprint != content_fingerprint(text)

    def analyze(self, text: str) -> PipelineResult:
        """Return the cached result for unchanged text, else recompute."""
        fingerprint = content_fingerprint(text)
        if self.last_result is not None and fingerprint == self.last_fingerprint:
            logger.debug(f"Content unchanged ({fingerprint[:12]}), reusing last analysis")
            return self.last_result

        result = run_pipeline(text, self.scanner)
        self.last_fingerprint = fingerprint
        self.last_result = result
        self.runs += 1
        return result

    def reset(self) -> None:
        self.last_fingerprint = None
        self.last_result = None
