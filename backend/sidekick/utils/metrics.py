"""Prometheus metrics for uploads and answering."""

from prometheus_client import Counter, Histogram

documents_uploaded_total = Counter(
    "documents_uploaded_total",
    "Total documents stored",
    ["media_type"],
)

upload_rejections_total = Counter(
    "upload_rejections_total",
    "Total rejected uploads",
    ["reason"],
)

answers_total = Counter(
    "answers_total",
    "Total answered questions by answer source",
    ["source"],
)

remote_latency_ms = Histogram(
    "remote_latency_ms",
    "Remote model call latency in milliseconds",
    ["outcome"],
    buckets=[100, 250, 500, 1000, 2000, 4000, 8000, 16000, 32000],
)


class PrometheusAnswerMetrics:
    """Prometheus-based metrics implementation."""

    def inc_upload(self, media_type: str) -> None:
        """Increment stored-document counter."""
        documents_uploaded_total.labels(media_type=media_type).inc()

    def inc_rejection(self, reason: str) -> None:
        """Increment rejected-upload counter."""
        upload_rejections_total.labels(reason=reason).inc()

    def inc_answer(self, source: str) -> None:
        """Increment answer counter."""
        answers_total.labels(source=source).inc()

    def record_remote_latency(self, outcome: str, latency_ms: float) -> None:
        """Record remote call latency."""
        remote_latency_ms.labels(outcome=outcome).observe(latency_ms)


metrics = PrometheusAnswerMetrics()
