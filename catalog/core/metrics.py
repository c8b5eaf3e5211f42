"""
Prometheus metrics (monitoring & observability).
Exposed by the API at /metrics; the ingestion script updates them in-process.
"""

from prometheus_client import Counter

UPLOADED_DOCUMENTS = Counter(
    "catalog_uploaded_documents_total",
    "Documents submitted to the search index",
)
UPLOADED_BATCHES = Counter(
    "catalog_uploaded_batches_total",
    "Document batches accepted by the search index",
)
API_ERRORS = Counter(
    "catalog_api_errors_total",
    "Error envelopes returned by the API",
    ["code"],
)
