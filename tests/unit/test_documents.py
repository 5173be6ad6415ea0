"""Unit tests for the in-memory document store."""

import json

import pytest
from pdf_page_search.store.documents import Document, InMemoryDocumentStore


class TestDocument:
    """Test cases for the Document model."""

    def test_field_aliases(self):
        """Test that extracted text is accepted in both key styles."""
        snake = Document.model_validate({"id": "1", "name": "a.pdf", "extracted_text": "x"})
        camel = Document.model_validate({"id": "1", "name": "a.pdf", "extractedText": "x"})

        assert snake.extracted_text == camel.extracted_text == "x"

    def test_text_is_optional(self):
        """Test that a document may have no extracted text yet."""
        document = Document(id="1", name="scan.pdf")

        assert document.extracted_text is None


class TestInMemoryDocumentStore:
    """Test cases for the InMemoryDocumentStore class."""

    @pytest.fixture
    def store(self):
        """Create a store with one document."""
        return InMemoryDocumentStore([
            Document(id="doc-1", name="report.pdf", extracted_text="[PAGE 1]\nHello")
        ])

    def test_get_document(self, store):
        """Test lookup by id."""
        document = store.get_document("doc-1")

        assert document is not None
        assert document.name == "report.pdf"
        assert store.get_document("missing") is None

    def test_add_replaces(self, store):
        """Test that adding an existing id replaces the document."""
        store.add(Document(id="doc-1", name="renamed.pdf"))

        assert len(store) == 1
        assert store.get_document("doc-1").name == "renamed.pdf"

    def test_remove(self, store):
        """Test removing documents."""
        assert store.remove("doc-1") is True
        assert store.remove("doc-1") is False
        assert "doc-1" not in store

    def test_clear_and_list(self, store):
        """Test listing and clearing the store."""
        store.add(Document(id="doc-2", name="b.pdf"))

        assert store.list_ids() == ["doc-1", "doc-2"]

        store.clear()
        assert len(store) == 0

    def test_load_json(self, tmp_path):
        """Test bulk loading from a JSON file."""
        path = tmp_path / "documents.json"
        path.write_text(json.dumps([
            {"id": "a", "name": "a.pdf", "extracted_text": "[PAGE 1]\nAlpha"},
            {"id": "b", "name": "b.pdf", "extracted_text": None},
        ]), encoding="utf-8")

        store = InMemoryDocumentStore()
        loaded = store.load_json(path)

        assert loaded == 2
        assert store.get_document("a").extracted_text == "[PAGE 1]\nAlpha"
        assert store.get_document("b").extracted_text is None

    def test_load_json_requires_list(self, tmp_path):
        """Test that a non-list JSON payload is rejected."""
        path = tmp_path / "documents.json"
        path.write_text(json.dumps({"id": "a"}), encoding="utf-8")

        with pytest.raises(ValueError):
            InMemoryDocumentStore().load_json(path)

    def test_load_json_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            InMemoryDocumentStore().load_json(tmp_path / "absent.json")
