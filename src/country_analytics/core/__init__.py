"""
Core data and analytics layer.

This package contains:
- model: the Country record and the Region enum
- data_loader: read and decode the countries JSON source
- repository: the immutable snapshot of all countries
- primitives: summaries, grouping, partitioning, sorting and text helpers
- queries: the query catalogue, organized by family
- report: overview facts and a tabular view of a collection
"""
