# Adapter over the Upstash Vector SDK.
# The index embeds raw text server-side, so queries and upserts send `data`
# strings rather than vectors. SDK retries are off: one request per call.

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List, Optional

from upstash_vector import Index
from upstash_vector.errors import UpstashError
from upstash_vector.types import Data

from digital_twin.settings import settings
from .types import VectorMatch


class VectorStoreError(RuntimeError):
    """Raised when the store rejects a request or is not configured."""


class UpstashVectorStore:
    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        index: Optional[Index] = None,
    ):
        self.url = url or settings.UPSTASH_VECTOR_REST_URL
        self.token = token or settings.UPSTASH_VECTOR_REST_TOKEN
        self._index = index

    @property
    def index(self) -> Index:
        if self._index is None:
            if not self.url or not self.token:
                raise VectorStoreError(
                    "Upstash Vector is not configured: set UPSTASH_VECTOR_REST_URL and UPSTASH_VECTOR_REST_TOKEN"
                )
            self._index = Index(url=self.url, token=self.token, retries=0)
        return self._index

    def query(self, text: str, top_k: int = 3, include_metadata: bool = True) -> List[VectorMatch]:
        try:
            rows = self.index.query(data=text, top_k=top_k, include_metadata=include_metadata)
        except UpstashError as e:
            raise VectorStoreError(str(e)) from e
        return [VectorMatch(id=str(r.id), score=float(r.score), metadata=r.metadata) for r in rows or []]

    def upsert(self, vectors: List[Dict[str, Any]]) -> Any:
        payload = [Data(id=v["id"], data=v["data"], metadata=v.get("metadata")) for v in vectors]
        try:
            return self.index.upsert(vectors=payload)
        except UpstashError as e:
            raise VectorStoreError(str(e)) from e

    def info(self) -> Dict[str, Any]:
        try:
            stats = self.index.info()
        except UpstashError as e:
            raise VectorStoreError(str(e)) from e
        return asdict(stats) if is_dataclass(stats) else dict(stats or {})
