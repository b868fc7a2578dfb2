"""Application layer.

Holds the ports that decouple the ingestion core from concrete adapters
such as the rich console logger.
"""
