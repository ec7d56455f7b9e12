"""Color embeddings — ingest named colors with name embeddings and search them."""

__version__ = "0.1.0"
