"""Prometheus metrics for analysis outcomes, category frequency and request latency"""

from prometheus_client import Counter, Histogram

from impact_gateway.domain.models import ImpactAnalysis

# Analysis metrics
analysis_counter = Counter(
    "impact_analysis_total",
    "Total credit report impact analyses",
    ["status"],  # impact_found | no_impact | not_analyzed
)

category_counter = Counter(
    "impact_category_total",
    "Impact categories reported",
    ["category"],
)

potential_gain_histogram = Histogram(
    "impact_potential_gain_points",
    "Total potential score gain per analysis",
    buckets=[0, 5, 10, 20, 30, 50, 75, 100],
)

report_parse_failures_counter = Counter(
    "report_parse_failures_total",
    "Credit report documents rejected as malformed",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(analysis: ImpactAnalysis) -> None:
    """Record analysis outcome and the categories it surfaced"""
    analysis_counter.labels(status=analysis.status).inc()

    if analysis.status == "not_analyzed":
        return

    potential_gain_histogram.observe(analysis.total_potential_gain)
    for summary in analysis.categories:
        category_counter.labels(category=summary.category).inc()
