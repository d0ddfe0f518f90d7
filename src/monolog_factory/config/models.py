"""
Configuration document models.

Pydantic models describing a parsed logging configuration: the ordered
handler entries, the optional processor entries and where the document
was loaded from.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HandlerSpec(BaseModel):
    """One entry of the ``handlers`` array."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    class_name: str = Field(..., alias="class", min_length=1, description="Registered handler type")
    parameters: Optional[Dict[str, Any]] = Field(
        None, description="Keyword arguments for the handler factory"
    )
    formatter: Optional[str] = Field(None, description="Registered formatter name")

    @field_validator("class_name")
    @classmethod
    def strip_class_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("class must not be blank")
        return v


class ProcessorSpec(BaseModel):
    """One entry of the ``processors`` array."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    class_name: str = Field(..., alias="class", min_length=1, description="Registered processor type")
    parameters: Optional[Dict[str, Any]] = Field(
        None, description="Keyword arguments for the processor factory"
    )


class ConfigDocument(BaseModel):
    """A fully validated logging configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    handlers: Tuple[HandlerSpec, ...] = Field(..., description="Handlers in attachment order")
    processors: Tuple[ProcessorSpec, ...] = Field(
        default=(), description="Processors in attachment order"
    )
    source: Optional[Path] = Field(None, description="File the document was read from")

    @property
    def handler_classes(self) -> Tuple[str, ...]:
        return tuple(spec.class_name for spec in self.handlers)
