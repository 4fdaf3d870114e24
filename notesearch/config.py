from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Web server settings
    cors_allow_origins: list[str] = ["*"]

    # Database settings
    local_note_store_path: str = "data/notes.json"

    # Search settings
    root_note_id: str = "root"
    related_notes_limit: int = 20
    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
