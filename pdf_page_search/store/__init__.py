"""Document storage collaborators."""

from .documents import Document, DocumentStore, InMemoryDocumentStore

__all__ = ["Document", "DocumentStore", "InMemoryDocumentStore"]
