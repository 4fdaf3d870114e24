"""CLI for applying the actions of a search note to a local note store file"""

import argparse
import asyncio
import logging
import sys

from notesearch.actions.registry import ActionRegistry
from notesearch.config import settings
from notesearch.exceptions import NoteSearchError
from notesearch.note_store.local import LocalNoteStore
from notesearch.query_engine.local import LocalQueryEngine
from notesearch.scripting.disabled import DisabledScriptRunner
from notesearch.search.resolver import SearchResolver
from notesearch.services.search_service import SearchNoteService


def main(note_id: str, note_store_path: str, dry_run: bool) -> int:
    note_store = LocalNoteStore(filepath=note_store_path)
    query_engine = LocalQueryEngine(note_store)
    script_runner = DisabledScriptRunner()
    resolver = SearchResolver(
        note_store=note_store,
        query_engine=query_engine,
        script_runner=script_runner,
        root_note_id=settings.root_note_id,
    )
    search_service = SearchNoteService(
        note_store=note_store,
        query_engine=query_engine,
        resolver=resolver,
        registry=ActionRegistry(note_store=note_store, script_runner=script_runner),
    )

    try:
        if dry_run:
            for result_note_id in asyncio.run(search_service.search_from_note(note_id)):
                print(result_note_id)
        else:
            asyncio.run(search_service.search_and_execute(note_id))
    except NoteSearchError as e:
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--note-id", type=str, required=True, help="ID of the search note")
    parser.add_argument(
        "--note-store",
        type=str,
        required=False,
        help="Local note store file",
        default=settings.local_note_store_path,
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the IDs of the matching notes, do not apply any action",
    )

    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    sys.exit(main(note_id=args.note_id, note_store_path=args.note_store, dry_run=args.dry_run))
