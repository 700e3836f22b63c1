#!/usr/bin/env python
"""
report/models.py - Pydantic models for the DARS report extractor and API
"""

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

ZERO = Decimal("0.00")


class RequirementStatus(str, Enum):
    """Completion status of a degree requirement."""
    COMPLETED = "Completed"
    IN_PROGRESS = "InProgress"
    NOT_COMPLETED = "NotCompleted"


class CreditSummary(BaseModel):
    """Credit totals as printed in the report. Absent values are 0.00."""
    model_config = ConfigDict(frozen=True)

    total_earned: Decimal = ZERO
    total_in_progress: Decimal = ZERO
    total_needed: Decimal = ZERO
    upper_div_earned: Decimal = ZERO
    upper_div_in_progress: Decimal = ZERO
    upper_div_needed: Decimal = ZERO


class GpaSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    cumulative_gpa: Decimal = ZERO
    major_gpa: Decimal = ZERO


class RequirementItem(BaseModel):
    """A single requirement (or sub-requirement) line."""
    model_config = ConfigDict(frozen=True)

    status: RequirementStatus
    text: str


class VerboseSection(BaseModel):
    """Everything printed under one requirement marker, up to the next delimiter."""
    model_config = ConfigDict(frozen=True)

    status: RequirementStatus
    identifier: str = Field(..., description="First 30 characters of the body with whitespace removed; not unique")
    body: str


class ReportSummary(BaseModel):
    """Everything extracted from one report."""
    model_config = ConfigDict(frozen=True)

    credits: CreditSummary = Field(default_factory=CreditSummary)
    gpa: GpaSummary = Field(default_factory=GpaSummary)
    general_requirements: List[RequirementItem] = Field(default_factory=list)
    sub_requirements: List[RequirementItem] = Field(default_factory=list)
    verbose_sections: List[VerboseSection] = Field(default_factory=list)


class ParseRequest(BaseModel):
    """Body for the JSON parse endpoint."""
    report_text: str = Field("", description="Raw DARS report text")
