"""Monitoring and metrics instrumentation for MediScan.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from mediscan.monitoring.metrics import (
    analysis_requests_total,
    llm_latency_seconds,
    llm_tokens_total,
    local_rule_matches_total,
    normalizer_fallbacks_total,
)

__all__ = [
    "analysis_requests_total",
    "llm_latency_seconds",
    "llm_tokens_total",
    "normalizer_fallbacks_total",
    "local_rule_matches_total",
]
