from pydantic import BaseModel, ConfigDict, Field


class LineRange(BaseModel):
    start_line: int = 1
    end_line: int | None = None
    full_file: bool = False


class Attachment(BaseModel):
    model_config = ConfigDict(ser_json_bytes="base64")

    data: bytes
    name: str


class ResolvedSnippet(BaseModel):
    content: str
    files: list[Attachment] = Field(default_factory=list)


class Reply(BaseModel):
    """Everything resolved from one message, combined for a single response."""

    content: str
    files: list[Attachment] = Field(default_factory=list)
    found: bool = True
