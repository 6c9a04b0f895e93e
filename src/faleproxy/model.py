# src/faleproxy/model.py
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WordRule(BaseModel):
    """
    The target/replacement word pair applied by the transformers.
    Configured once per DocumentTransformer, never per request.
    """
    target: str
    replacement: str

    @field_validator('target')
    @classmethod
    def target_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("target word cannot be empty")
        return v

    @model_validator(mode='after')
    def replacement_excludes_target(self) -> 'WordRule':
        # A replacement containing the target would be rewritten again on every pass
        if re.search(rf"\b{re.escape(self.target)}\b", self.replacement, re.IGNORECASE):
            raise ValueError("replacement must not contain the target word as a whole word")
        return self


class TransformResult(BaseModel):
    html: str = ""
    title: str = ""


class ProxyResponse(BaseModel):
    """JSON payload returned by POST /fetch on success."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    content: str
    title: str
    original_url: str = Field(alias="originalUrl")


class ProxyRequest(BaseModel):
    url: Optional[str] = None

    @field_validator('url', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v or None
