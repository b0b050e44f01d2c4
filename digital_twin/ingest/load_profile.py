# load_profile.py
# ============================================================
# Push a profile JSON file into the Upstash Vector index.
#
#   python -m digital_twin.ingest.load_profile --file data/profile.json
#   python -m digital_twin.ingest.load_profile --info
#
# Profile shape:
#   {"content_chunks": [{"id", "title", "content", "type",
#                        "metadata": {"category", "tags"}}, ...]}
# ============================================================

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from digital_twin.search import UpstashVectorStore
from digital_twin.ingest.loader import load_profile_data


def read_profile(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load profile content chunks into the vector store")
    parser.add_argument("--file", type=Path, help="Path to the profile JSON document")
    parser.add_argument("--info", action="store_true", help="Print vector store statistics and exit")
    args = parser.parse_args(argv)

    store = UpstashVectorStore()

    if args.info:
        print(json.dumps(store.info(), indent=2))
        return 0

    if args.file is None:
        parser.error("--file is required unless --info is given")

    result = load_profile_data(store, read_profile(args.file))
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
