from typing import List, Optional

from pydantic import BaseModel, Field

from .common import TaskKind


class InlineData(BaseModel):
    data: str = Field(..., description="Base64 encoded bytes")
    mime_type: str


class PromptPart(BaseModel):
    text: Optional[str] = None
    inline_data: Optional[InlineData] = None


class PromptPayload(BaseModel):
    task: TaskKind
    system_instruction: str
    parts: List[PromptPart] = Field(default_factory=list)
    temperature: float = 0.4
    max_output_tokens: int = 500
    use_search: bool = False

    @property
    def text(self) -> str:
        return "\n".join(part.text for part in self.parts if part.text)
