from fastapi import APIRouter, HTTPException
from loguru import logger

from notesearch.domain.note import Attribute
from notesearch.domain.search import RelatedNotes
from notesearch.exceptions import NoteNotFoundError, NotASearchNoteError
from notesearch.search.related import RelatedNotesRanker
from notesearch.services.search_service import SearchNoteService


def _create_search_from_note_endpoint(search_service: SearchNoteService):
    """Create the search note endpoint handler."""

    async def search_from_note(note_id: str) -> list[str]:
        """Return the IDs of the notes a search note matches."""
        try:
            return await search_service.search_from_note(note_id)
        except NoteNotFoundError as err:
            raise HTTPException(status_code=404, detail=str(err)) from err
        except NotASearchNoteError as err:
            raise HTTPException(status_code=400, detail=str(err)) from err
        except Exception as e:
            logger.error(f"Error searching from note {note_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return search_from_note


def _create_search_and_execute_endpoint(search_service: SearchNoteService):
    """Create the search-and-execute endpoint handler."""

    async def search_and_execute(note_id: str) -> dict:
        """Apply the actions of a search note to every note it matches."""
        try:
            await search_service.search_and_execute(note_id)
        except NoteNotFoundError as err:
            raise HTTPException(status_code=404, detail=str(err)) from err
        except NotASearchNoteError as err:
            raise HTTPException(status_code=400, detail=str(err)) from err
        except Exception as e:
            logger.error(f"Error executing search note {note_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e
        return {}

    return search_and_execute


def _create_related_notes_endpoint(related_notes_ranker: RelatedNotesRanker):
    """Create the related notes endpoint handler."""

    async def get_related_notes(attribute: Attribute) -> RelatedNotes:
        """Find notes carrying the same attribute, value matches first."""
        try:
            return related_notes_ranker.related(attribute)
        except Exception as e:
            logger.error(f"Error finding notes related to '{attribute.name}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_related_notes


def get_endpoints_router(
    *,
    search_service: SearchNoteService,
    related_notes_ranker: RelatedNotesRanker,
) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/api/search/{search_string}")
    async def search(search_string: str) -> list[str]:
        return search_service.search(search_string)

    @router.get("/api/quick-search/{search_string}")
    async def quick_search(search_string: str) -> list[str]:
        return search_service.quick_search(search_string)

    router.get("/api/search-note/{note_id}")(_create_search_from_note_endpoint(search_service))
    router.post("/api/search-and-execute-note/{note_id}")(
        _create_search_and_execute_endpoint(search_service)
    )
    router.post("/api/search-related")(_create_related_notes_endpoint(related_notes_ranker))

    return router
