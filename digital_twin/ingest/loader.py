# Batch upsert of profile content chunks into the vector store.
# Runs ahead of (and independently from) querying.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from digital_twin.log import get_logger
from digital_twin.search.types import ContentChunk

logger = get_logger("loader")


@dataclass
class LoadResult:
    success: bool
    message: str
    count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.count is not None:
            out["count"] = self.count
        return out


def load_profile_data(store, profile: Dict[str, Any]) -> LoadResult:
    """
    Map `profile["content_chunks"]` into the store's upsert shape and write
    them in a single batch. Never raises; failures come back as success=False.
    """
    try:
        raw_chunks = (profile or {}).get("content_chunks") or []
        if not raw_chunks:
            return LoadResult(success=False, message="No content chunks found in profile data")

        vectors = [ContentChunk.from_dict(c).to_vector() for c in raw_chunks]
        store.upsert(vectors)

        logger.info("Upserted %d content chunks", len(vectors))
        return LoadResult(
            success=True,
            message=f"Successfully loaded {len(vectors)} content chunks",
            count=len(vectors),
        )
    except Exception as e:
        logger.exception("Load data error")
        return LoadResult(success=False, message=f"Error: {e}")
