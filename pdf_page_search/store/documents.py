"""Document store collaborator consumed by the search coordinator."""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A stored document and its extracted text."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Document identifier")
    name: str = Field(..., description="Display name")
    extracted_text: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("extracted_text", "extractedText"),
        description="Page-marked plain text, or None if not yet extracted"
    )


class DocumentStore(Protocol):
    """Read-only lookup of documents by id."""

    def get_document(self, document_id: str) -> Optional[Document]:
        ...


class InMemoryDocumentStore:
    """Dictionary-backed document store."""

    def __init__(self, documents: Optional[Iterable[Document]] = None) -> None:
        self._documents: Dict[str, Document] = {}
        for document in documents or []:
            self.add(document)

    def add(self, document: Document) -> None:
        """Add or replace a document."""
        self._documents[document.id] = document

    def remove(self, document_id: str) -> bool:
        """
        Remove a document.

        Args:
            document_id: Identifier of the document

        Returns:
            True if a document was removed
        """
        return self._documents.pop(document_id, None) is not None

    def clear(self) -> None:
        self._documents.clear()

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._documents.get(document_id)

    def list_ids(self) -> List[str]:
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def load_json(self, path: Union[str, Path]) -> int:
        """
        Load documents from a JSON file.

        The file holds a list of objects with ``id``, ``name`` and
        ``extracted_text`` keys.

        Args:
            path: Path to the JSON file

        Returns:
            Number of documents loaded

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a JSON list of documents
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Expected a list of documents in {path}")

        documents = [Document.model_validate(item) for item in data]
        for document in documents:
            self.add(document)

        return len(documents)
