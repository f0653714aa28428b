"""
Typed Pydantic models for the trim debug report.

explain() returns a TrimReport; its model_dump() is the payload checked
against TRIM_REPORT_SCHEMA.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from mailtrim.config.constants import CATEGORY_NAMES


class ReportLine(BaseModel):
    """A classified line as shown in the report."""

    index: int = Field(..., ge=0)
    text: str
    code: str = Field(..., description="Single category code.")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if v not in CATEGORY_NAMES:
            raise ValueError(f"code must be one of {sorted(CATEGORY_NAMES)}, got '{v}'")
        return v


class TrimReport(BaseModel):
    """
    Full trace of one trim: line codes, cut decision and both halves.

    initial_cut is the earliest trigger (B0), cut is the index after
    absorbing the empty/signature lines right before it.
    """

    codes: str
    lines: List[ReportLine]
    initial_cut: int = Field(..., ge=0)
    cut: int = Field(..., ge=0)
    rule: Optional[str] = Field(None, description="'header_run' | 'embedded_marker' | 'delimiter' | 'trailing_quote' | None")
    kept: str
    elided: str
    catalog_version: str

    @model_validator(mode="after")
    def validate_consistency(self) -> "TrimReport":
        if len(self.codes) != len(self.lines):
            raise ValueError("codes and lines must have the same length")
        if not self.cut <= self.initial_cut <= len(self.lines):
            raise ValueError("expected cut <= initial_cut <= number of lines")
        return self
