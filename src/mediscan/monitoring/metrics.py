"""Custom Prometheus metrics for MediScan.

Exposed at /metrics alongside the instrumentator's HTTP metrics. Worth
alerting on:
- analysis_requests_total{source="local"} (upstream unavailable)
- normalizer_fallbacks_total (model ignoring the requested JSON shape)
"""

from prometheus_client import Counter, Histogram

# === Request Outcome Metrics ===

analysis_requests_total = Counter(
    "analysis_requests_total",
    "Total analysis requests by result source",
    ["source"],
)
"""
Analysis requests by where the result came from.

Labels:
- source: llm (upstream answered), local (classifier fallback), invalid (rejected input)

Alert thresholds:
- WARN: local share > 10% of requests
- CRITICAL: local share > 50% of requests (upstream likely down or key revoked)
"""

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "LLM generation latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens consumed by model and type",
    ["model", "token_type"],
)
"""
Token consumption counter.

Labels:
- model: Model name
- token_type: prompt (input tokens), completion (output tokens)
"""

# === Normalization Metrics ===

normalizer_fallbacks_total = Counter(
    "normalizer_fallbacks_total",
    "Upstream completions that could not be normalized, by reason",
    ["reason"],
)
"""
Labels:
- reason: no_json_object, json_decode_error, schema_mismatch
"""

local_rule_matches_total = Counter(
    "local_rule_matches_total",
    "Local classifier condition rule matches",
    ["condition"],
)
