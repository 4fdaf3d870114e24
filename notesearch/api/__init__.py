from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notesearch.actions.registry import ActionRegistry
from notesearch.api.endpoints import get_endpoints_router
from notesearch.config import settings
from notesearch.note_store.base import NoteStore
from notesearch.query_engine.base import QueryEngine
from notesearch.scripting.base import ScriptRunner
from notesearch.search.related import RelatedNotesRanker
from notesearch.search.resolver import SearchResolver
from notesearch.services.search_service import SearchNoteService


def create_app(
    *,
    note_store: NoteStore,
    query_engine: QueryEngine,
    script_runner: ScriptRunner,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    registry = ActionRegistry(note_store=note_store, script_runner=script_runner)
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
        registry=registry,
    )
    related_notes_ranker = RelatedNotesRanker(query_engine, limit=settings.related_notes_limit)

    app.include_router(
        router=get_endpoints_router(
            search_service=search_service, related_notes_ranker=related_notes_ranker
        )
    )

    return app
