# ============================================================
# Digital twin RAG query service
# ------------------------------------------------------------
#   1) similarity search against the vector store (top 3)
#   2) "{title}: {content}" context, store order
#   3) one completion from the model client
# Both collaborators are injected so tests can run against fakes.
# ============================================================

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from digital_twin.log import get_logger
from digital_twin.search.types import Source
from digital_twin.generate import ChatGenerator
from digital_twin.ingest.loader import LoadResult, load_profile_data

logger = get_logger("twin")

TOP_K = 3
FALLBACK_RESPONSE = "I don't have specific information about that topic."
EMPTY_COMPLETION = "Unable to generate response"


@dataclass
class QueryResult:
    success: bool
    response: str
    sources: Optional[List[Source]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "response": self.response}
        if self.sources is not None:
            out["sources"] = [asdict(s) for s in self.sources]
        return out


class DigitalTwin:
    def __init__(self, store, generator: ChatGenerator, top_k: int = TOP_K):
        self.store = store
        self.generator = generator
        self.top_k = top_k

    def query(self, question: str) -> QueryResult:
        """
        Answer `question` in the profile owner's voice.
        Errors from either collaborator are returned as success=False.
        """
        try:
            matches = self.store.query(question, top_k=self.top_k, include_metadata=True)
            if not matches:
                logger.info("No matches for question; skipping generation")
                return QueryResult(success=False, response=FALLBACK_RESPONSE)

            out = self.generator.answer(question, matches)
            sources = [Source(title=(m.metadata or {}).get("title"), score=m.score) for m in matches]
            logger.info("Answered with %d sources (%s)", len(sources), out.meta.get("model"))
            return QueryResult(
                success=True,
                response=out.text or EMPTY_COMPLETION,
                sources=sources,
            )
        except Exception as e:
            logger.exception("Digital twin query error")
            return QueryResult(success=False, response=f"Error: {e}")

    def load(self, profile: Dict[str, Any]) -> LoadResult:
        return load_profile_data(self.store, profile)

    def vector_info(self) -> Dict[str, Any]:
        try:
            return {"success": True, "info": self.store.info()}
        except Exception as e:
            logger.exception("Vector info error")
            return {"success": False, "error": str(e)}
