"""Settings for the library's own diagnostics."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_logs: bool = Field(default=True, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    max_bytes: int = Field(default=1_000_000, ge=0, description="Max log file size before rotation")
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")
