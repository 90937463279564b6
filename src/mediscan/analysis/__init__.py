"""
Analysis orchestration (upstream inference with local fallback).
"""

from mediscan.analysis.orchestrator import AnalysisOrchestrator, parse_request

__all__ = [
    "AnalysisOrchestrator",
    "parse_request",
]
