#!/usr/bin/env python3
"""
Load directory documents into the Nursery Directory SQLite store.

The API itself is read-only; this script is the offline way to fill or
refresh the store.  The input file is a JSON object mapping collection
names to lists of documents.  Each document must carry an ``id``;
the id is used as the document key and the remaining fields become
the document body.  The site settings record is a single object:

    {
      "nurseries": [{"id": "n1", "name": "Green Oasis", "location": "Riyadh"}],
      "categories": [{"id": "c1", "title": "Succulents", "order": 1}],
      "settings": [{"id": "site", "title": "...", "subtitle": "..."}]
    }

Usage:
    python seed_documents.py --file ./seed.json [--db ./nursery_directory.db]

Documents with an existing id are replaced in place.
"""

import argparse
import json
import os
import sys

from nursery_directory.app.core import db
from nursery_directory.app.core.config import settings


def load_documents(payload: dict) -> int:
    """Write every document of ``payload`` and return how many were stored."""
    count = 0
    for collection, documents in payload.items():
        if not isinstance(documents, list):
            raise ValueError(f"Collection {collection!r} must be a list of documents")
        for document in documents:
            body = dict(document)
            doc_id = body.pop("id", None)
            if doc_id is None or doc_id == "":
                raise ValueError(f"Document without id in collection {collection!r}")
            db.put_document(collection, str(doc_id), body)
            count += 1
    return count


def main():
    ap = argparse.ArgumentParser(description="Load JSON documents into the nursery directory store.")
    ap.add_argument("--file", required=True, help="Path to the JSON file with {collection: [documents]}")
    ap.add_argument("--db", help="Path to the SQLite file (defaults to DATABASE_URL)")
    args = ap.parse_args()

    if not os.path.exists(args.file):
        print(f"[!] File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    if args.db:
        settings.database_url = os.path.abspath(args.db)

    with open(args.file, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        print("[!] Top-level JSON value must be an object", file=sys.stderr)
        sys.exit(1)

    db.init_db()
    try:
        count = load_documents(payload)
    except ValueError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Stored {count} documents in {db.get_database_path()}")


if __name__ == "__main__":
    main()
