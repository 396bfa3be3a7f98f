"""Configuration model for labsh."""

from pydantic import BaseModel, Field

from labsh.constants import DEFAULT_BANNER, DEFAULT_PROMPT, MAX_LINE_LENGTH


class ShellConfig(BaseModel):
    """Runtime configuration for the shell loop."""

    prompt: str = DEFAULT_PROMPT
    banner: str = DEFAULT_BANNER
    max_line_length: int = Field(default=MAX_LINE_LENGTH, ge=2)
    echo: bool = True
    report_status: bool = False
