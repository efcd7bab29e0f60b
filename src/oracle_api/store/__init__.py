"""Document store layer -- Elasticsearch search over httpx."""

from oracle_api.store.client import DocumentStore
from oracle_api.store.elastic_client import ElasticsearchStore

__all__ = ["DocumentStore", "ElasticsearchStore"]
