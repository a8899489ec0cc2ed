from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SchemeCategory(str, Enum):
    SUBSIDY = "subsidy"
    INSURANCE = "insurance"
    LOAN = "loan"
    PENSION = "pension"


class Scheme(BaseModel):
    id: str
    title: str
    category: SchemeCategory
    description: str
    eligibility: List[str] = Field(default_factory=list)
    deadline: Optional[str] = None


class SchemeProfile(BaseModel):
    state: str = Field(default="Karnataka")
    district: Optional[str] = None
    land_acres: Optional[float] = Field(default=None, ge=0)
    crop: Optional[str] = None
    category: Optional[str] = Field(
        default=None, description="Social category, e.g. General, SC, ST, OBC"
    )
    annual_income: Optional[int] = Field(default=None, ge=0, description="Rupees per year")
    notes: Optional[str] = None
