# Data models for the search layer: what gets stored in the vector index
# and what comes back from a similarity query.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class ContentChunk:
    """One retrievable unit of profile knowledge."""
    id: str
    title: str
    content: str
    type: Optional[str] = None
    category: str = ""
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ContentChunk":
        meta = raw.get("metadata") or {}
        return cls(
            id=raw["id"],
            title=raw.get("title"),
            content=raw.get("content"),
            type=raw.get("type"),
            category=meta.get("category") or "",
            tags=meta.get("tags") or [],
        )

    def to_vector(self) -> Dict[str, Any]:
        """Upsert shape: the store embeds `data` itself."""
        return {
            "id": self.id,
            "data": f"{self.title}: {self.content}",
            "metadata": {
                "title": self.title,
                "type": self.type,
                "content": self.content,
                "category": self.category,
                "tags": self.tags,
            },
        }


@dataclass
class VectorMatch:
    """A single hit returned by the vector store."""
    id: str
    score: float
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class Source:
    """Citation attached to an answer."""
    title: Optional[str]
    score: float
