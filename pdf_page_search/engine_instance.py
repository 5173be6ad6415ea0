"""Global document store and search coordinator to avoid circular imports."""

from .config import get_settings
from .core.coordinator import SearchCoordinator
from .store.documents import InMemoryDocumentStore

settings = get_settings()

# Populated at startup; read-only while serving
document_store = InMemoryDocumentStore()

search_coordinator = SearchCoordinator(
    document_store,
    fuzzy_threshold=settings.fuzzy_threshold,
    max_query_length=settings.max_query_length,
    max_page_length=settings.max_page_length
)
