import logging
import sys

from loguru import logger

from notesearch.api import create_app
from notesearch.config import settings
from notesearch.note_store.local import LocalNoteStore
from notesearch.query_engine.local import LocalQueryEngine
from notesearch.scripting.disabled import DisabledScriptRunner


class LoguruHandler(logging.Handler):
    """Forward standard library log records from the notesearch modules to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # find the frame that issued the record so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

notesearch_logger = logging.getLogger("notesearch")
notesearch_logger.setLevel(settings.log_level)
notesearch_logger.addHandler(LoguruHandler())

logger.info(f"Loading notes from {settings.local_note_store_path}")
note_store = LocalNoteStore(filepath=settings.local_note_store_path)
query_engine = LocalQueryEngine(note_store)
script_runner = DisabledScriptRunner()
app = create_app(
    note_store=note_store,
    query_engine=query_engine,
    script_runner=script_runner,
)
