from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

class InlineImagePart(BaseModel):
    kind: Literal["inline_image"] = "inline_image"
    mime_type: Optional[str] = None
    data: str

class TextPart(BaseModel):
    kind: Literal["text"] = "text"
    text: str

class UnknownPart(BaseModel):
    kind: Literal["unknown"] = "unknown"

ContentPart = Annotated[Union[InlineImagePart, TextPart, UnknownPart], Field(discriminator="kind")]

class Candidate(BaseModel):
    parts: List[ContentPart] = []
    finish_reason: Optional[str] = None

class GenerateContentResponse(BaseModel):
    candidates: List[Candidate] = []

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "GenerateContentResponse":
        """Build a typed response from the raw generateContent JSON body"""
        if not isinstance(data, dict):
            raise ValueError("Response body is not a JSON object")

        candidates = []
        for raw_candidate in data.get("candidates") or []:
            content = raw_candidate.get("content") or {}
            parts = [parse_part(raw_part) for raw_part in content.get("parts") or []]
            candidates.append(Candidate(
                parts=parts,
                finish_reason=raw_candidate.get("finishReason")
            ))
        return cls(candidates=candidates)

def parse_part(raw_part: Dict[str, Any]) -> ContentPart:
    """Tag a raw content part by what it carries"""
    # The REST API answers in camelCase but accepts snake_case too
    inline = raw_part.get("inlineData") or raw_part.get("inline_data")
    if inline and inline.get("data"):
        return InlineImagePart(
            mime_type=inline.get("mimeType") or inline.get("mime_type"),
            data=inline["data"]
        )
    if isinstance(raw_part.get("text"), str):
        return TextPart(text=raw_part["text"])
    return UnknownPart()
