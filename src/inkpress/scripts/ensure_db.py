"""Utility script to prepare the configured MongoDB database."""
from __future__ import annotations

import argparse
import sys

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from inkpress.core.settings import settings
from inkpress.db.session import Collections, ensure_indexes


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create the indexes the blog relies on")
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--database",
        default=None,
        help="Override database name (defaults to DATABASE_NAME)",
    )
    args = parser.parse_args(argv)

    client: MongoClient = MongoClient(args.url or settings.database_url)
    try:
        db = client[args.database or settings.database_name]
        ensure_indexes(db)
        for name in (Collections.POSTS, Collections.COMMENTS, Collections.REPLIES,
                     Collections.SUBSCRIBERS):
            print(f"[ensure_db] {name}: {db[name].count_documents({})} document(s)")
    except PyMongoError as exc:
        print(f"[ensure_db] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
