"""Configuration model for smallsh."""

import os

from pydantic import BaseModel, Field

DEFAULT_PROMPT = ": "
DEFAULT_MAX_LINE_LENGTH = 2048
DEFAULT_MAX_ARGS = 512


class ShellConfig(BaseModel):
    """Runtime configuration for smallsh."""

    prompt: str = DEFAULT_PROMPT
    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, ge=1)
    max_args: int = Field(default=DEFAULT_MAX_ARGS, ge=1)
    null_device: str = os.devnull
    output_file_mode: int = Field(default=0o644, ge=0, le=0o777)
    report_cd_failures: bool = True
