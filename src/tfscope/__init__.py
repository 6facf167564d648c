"""
tfscope: Terraform dependency and impact explorer.

Extracts resource and module blocks from raw configuration text, builds the
dependency graph between them and answers "what breaks if this changes?".

    from tfscope import run_pipeline
    result = run_pipeline(text)
    result.impact_set("aws_instance.web")
"""

__version__ = "0.1.0"

from .pipeline import AnalysisSession, PipelineResult, content_fingerprint, run_pipeline
from .parsing.scanner import scan, scan_text

__all__ = [
    "AnalysisSession",
    "PipelineResult",
    "__version__",
    "content_fingerprint",
    "run_pipeline",
    "scan",
    "scan_text",
]
