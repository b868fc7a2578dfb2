"""Domain layer.

Pure ingestion rules: splitting a line into fields, classifying a field and
reconciling column types. It is independent of file access and presentation.
"""
