"""In-memory, type-partitioned embedding store with (text, type) dedup."""

import logging
import threading
from typing import Sequence

from embedstore.exceptions import DimensionalityMismatchError
from embedstore.models.embedding import StoredEmbedding, StoreStats


logger = logging.getLogger(__name__)


class EmbeddingStore:
    """
    Concurrent collection of stored embeddings.
    
    Items are kept in insertion order. The (text, embedding_type) pair is
    unique; inserting an existing pair returns the item already held, even
    when the new vector came from a different model.
    
    Every operation runs under one lock. Critical sections are short and
    never suspend, so callers must compute embeddings before calling
    ``insert``.
    """
    
    def __init__(self):
        self._lock = threading.Lock()
        self._items: dict[str, StoredEmbedding] = {}
        self._by_key: dict[tuple[str, str], str] = {}
        self._by_type: dict[str, list[str]] = {}
        self._dimensions: dict[str, int] = {}
    
    def insert(
        self,
        text: str,
        embedding_type: str,
        vector: Sequence[float],
        model: str,
    ) -> tuple[StoredEmbedding, bool]:
        """
        Store an embedding unless its (text, embedding_type) key is present.
        
        Args:
            text: Source text.
            embedding_type: Category tag, "" for the default partition.
            vector: Embedding components.
            model: Model that produced the vector.
            
        Returns:
            Tuple of (item, was_newly_created).
            
        Raises:
            DimensionalityMismatchError: If the key is new and the vector length
                differs from the length already established for ``model``.
        """
        key = (text, embedding_type)
        
        with self._lock:
            existing_id = self._by_key.get(key)
            if existing_id is not None:
                return self._items[existing_id], False
            
            expected = self._dimensions.get(model)
            if expected is not None and expected != len(vector):
                raise DimensionalityMismatchError(model, expected, len(vector))
            
            item = StoredEmbedding(
                text=text,
                embedding_type=embedding_type,
                vector=tuple(float(v) for v in vector),
                model=model,
            )
            
            self._items[item.id] = item
            self._by_key[key] = item.id
            self._by_type.setdefault(embedding_type, []).append(item.id)
            self._dimensions.setdefault(model, len(item.vector))
        
        logger.debug("Stored %s (type=%r, model=%s)", item.id, embedding_type, model)
        return item, True
    
    def snapshot(self, embedding_type: str | None = None) -> list[StoredEmbedding]:
        """
        Point-in-time view of the store in insertion order.
        
        Args:
            embedding_type: If given, only items with exactly this type.
        """
        with self._lock:
            if embedding_type is None:
                return list(self._items.values())
            return [self._items[i] for i in self._by_type.get(embedding_type, [])]
    
    def clear(self) -> int:
        """Remove every item. Returns the number removed."""
        with self._lock:
            removed = len(self._items)
            self._items = {}
            self._by_key = {}
            self._by_type = {}
            self._dimensions = {}
        
        logger.info("Cleared %d stored embeddings", removed)
        return removed
    
    def size(self) -> int:
        with self._lock:
            return len(self._items)
    
    def size_by_type(self, embedding_type: str) -> int:
        with self._lock:
            return len(self._by_type.get(embedding_type, []))
    
    def get(self, item_id: str) -> StoredEmbedding | None:
        with self._lock:
            return self._items.get(item_id)
    
    def types(self) -> list[str]:
        """Embedding types currently present, in first-seen order."""
        with self._lock:
            return list(self._by_type)
    
    def dimensions(self, model: str) -> int | None:
        """Vector length established for ``model``, if any item uses it."""
        with self._lock:
            return self._dimensions.get(model)
    
    def stats(self) -> StoreStats:
        with self._lock:
            return StoreStats(
                total=len(self._items),
                by_type={t: len(ids) for t, ids in self._by_type.items()},
            )
    
    def __len__(self) -> int:
        return self.size()
