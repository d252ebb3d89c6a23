"""Builders for Elasticsearch query, aggregation and index-mapping request bodies."""

__version__ = "0.1.0"

__all__ = [
    "base",
    "buckets",
    "builder",
    "field_types",
    "mapping",
    "metrics",
    "properties",
    "queries",
    "util",
]