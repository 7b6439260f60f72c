from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.domain import CountryCode, Source



class BrandConnectionRecord(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    manufacturer_p1: str = Field(..., min_length=1)
    manufacturers_p2: str = ""

    @field_validator("manufacturers_p2", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class PharmacyItemRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    source_id: str = Field(..., min_length=1)

    @field_validator("source_id", mode="before")
    @classmethod
    def _source_id_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class BrandMatchRequest(BaseModel):
    title: str = Field(..., min_length=1)


class BrandMatchResponse(BaseModel):
    title: str
    matched_brands: List[str]
    priority_brand: Optional[str]
    brand: Optional[str]


class BrandAssignmentRequest(BaseModel):
    country_code: CountryCode
    source: Source


class BrandAssignmentResponse(BaseModel):
    country_code: str
    source: str
    status: str
    task_id: Optional[str] = None
    total: Optional[int] = None
    matched: Optional[int] = None
    output_path: Optional[str] = None
