"""Application configuration via environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    model_config = {"env_prefix": "PHASELLUS_"}

    # default file for save/load; the board and shell prompts start from it
    scores_file: Path = Path("scores.json")

    # empty string disables file logging
    log_dir: str = "logs"

    prompt: str = Field(default="yacht> ", min_length=1)

    @property
    def log_path(self) -> Path | None:
        return Path(self.log_dir) if self.log_dir else None
