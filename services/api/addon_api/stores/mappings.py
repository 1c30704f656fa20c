"""In-memory store for manual add-on mappings.

Handles:
- product id -> ordered list of AddOnReference
- Whole-entry replacement on write (last write wins, no merge)

Nothing is persisted: the table lives for the lifetime of the process.
A single lock guards the dict because sync dependencies and handlers may run
in the threadpool; reads return copies so a caller never sees a torn entry.
"""

import logging
import threading

from addon_api.schemas import AddOnReference

logger = logging.getLogger("uvicorn.error")


class MappingStore:
    """Process-lifetime mapping from primary product id to add-on references."""

    def __init__(self) -> None:
        self._mappings: dict[int, list[AddOnReference]] = {}
        self._lock = threading.Lock()

    def put(self, product_id: int, references: list[AddOnReference]) -> None:
        """Replace the add-on references stored for a product.

        Args:
            product_id: Primary product id.
            references: Ordered add-on references. An empty list clears the
                mapping so the product falls back to category-driven mode.
        """
        entry = list(references)
        with self._lock:
            self._mappings[product_id] = entry
        logger.info(f"Stored {len(entry)} add-on mapping(s) for product_id={product_id}")

    def get(self, product_id: int) -> list[AddOnReference]:
        """Get a snapshot of the references for a product (empty if absent)."""
        with self._lock:
            return list(self._mappings.get(product_id, ()))

    def clear(self) -> None:
        """Drop every mapping."""
        with self._lock:
            self._mappings.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._mappings)


# Singleton store instance
_store: MappingStore | None = None


def get_mapping_store() -> MappingStore:
    """Get mapping store singleton."""
    global _store
    if _store is None:
        _store = MappingStore()
    return _store
