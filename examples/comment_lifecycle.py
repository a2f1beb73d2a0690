"""Example: walk a comment through create, read, update and a failing read.

Usage:
    export TAF_BASE_URL=https://jsonplaceholder.typicode.com
    python examples/comment_lifecycle.py
"""

from __future__ import annotations

import logging
import sys
from http import HTTPStatus
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from placeholder_taf.client import PlaceholderApi
from placeholder_taf.endpoints.errors import StatusAssertionError
from placeholder_taf.models import Comment


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    api = PlaceholderApi.from_env()

    print("=== Comment lifecycle ===\n")

    # 1. Create (expects 201)
    created = api.comments.create(Comment(postId=1, name="Jane", email="jane@example.com", body="nice post"))
    print(f"Created: {created.model_dump_json(by_alias=True)}")

    # 2. Read an existing comment (expects 200)
    existing = api.comments.get_by_id(1)
    print(f"Read:    {existing.model_dump_json(by_alias=True)}")

    # 3. Update it (expects 200)
    updated = api.comments.update(existing.id, existing.model_copy(update={"name": "Jane Doe"}))
    print(f"Updated: {updated.model_dump_json(by_alias=True)}")

    # 4. Expect the wrong status on purpose
    try:
        api.comments.get_by_id_response(existing.id, HTTPStatus.NOT_FOUND)
    except StatusAssertionError as exc:
        print(f"\nStatus assertion failed as intended: expected {exc.expected}, got {exc.actual}")


if __name__ == "__main__":
    main()
