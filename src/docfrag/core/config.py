import codecs
import enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..app import config
from ..events import FunctionMode
from .types import WorkerCount


class OutputFormat(str, enum.Enum):
    """How scan results are printed."""

    TABLE = "table"
    JSON = "json"


class ImmutableConfig(BaseModel):
    """Base class for immutable configuration models."""

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )


class ScanConfig(ImmutableConfig):
    """
    Options of a ``docfrag scan`` run.
    """

    paths: tuple[Path, ...] = Field(..., min_length=1)
    encoding: str = config.DEFAULT_SOURCE_ENCODING
    max_workers: WorkerCount = config.DEFAULT_MAX_WORKERS
    output: OutputFormat = OutputFormat.TABLE
    event_mode: FunctionMode | None = None
    show_content: bool = False

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to the codec registry."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
