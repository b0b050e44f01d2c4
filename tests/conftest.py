# Shared fakes: a vector store and a model client that record their calls.

import pytest

from digital_twin.generate import ChatGenerator
from digital_twin.search.types import VectorMatch
from digital_twin.twin import DigitalTwin


class FakeStore:
    def __init__(self, matches=None, error=None, info=None):
        self.matches = matches or []
        self.error = error
        self._info = info or {"vectorCount": len(self.matches), "dimension": 1024}
        self.queries = []
        self.upserts = []

    def query(self, text, top_k=3, include_metadata=True):
        self.queries.append({"text": text, "top_k": top_k, "include_metadata": include_metadata})
        if self.error:
            raise self.error
        return list(self.matches)

    def upsert(self, vectors):
        if self.error:
            raise self.error
        self.upserts.append(vectors)
        return "Success"

    def info(self):
        if self.error:
            raise self.error
        return self._info


class FakeModelClient:
    def __init__(self, text="I have strong skills in X and Y.", error=None):
        self.model = "fake-model"
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((messages, params))
        if self.error:
            raise self.error
        return self.text, {"engine": "fake", "model": params.model}


def make_matches(*pairs):
    return [
        VectorMatch(id=f"chunk-{i}", score=score, metadata={"title": title, "content": f"{title} details"})
        for i, (title, score) in enumerate(pairs)
    ]


@pytest.fixture
def two_matches():
    return make_matches(("Skills", 0.91), ("Experience", 0.84))


@pytest.fixture
def model_client():
    return FakeModelClient()


@pytest.fixture
def store(two_matches):
    return FakeStore(matches=two_matches)


@pytest.fixture
def twin(store, model_client):
    return DigitalTwin(store=store, generator=ChatGenerator(model_client=model_client))
