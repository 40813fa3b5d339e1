"""Request schemas for the jobs API.

JSON uses camelCase (companyHandle, titleLike, ...); the models expose
snake_case attributes so they can be handed straight to JobDB.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..jobs.filters import JobFilter


def _equity_from_float(value):
    # Decimal(0.1) would keep the binary expansion; go through repr instead
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class JobNew(BaseModel):
    """Schema for creating a job"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, alias="companyHandle")

    @field_validator("equity", mode="before")
    @classmethod
    def equity_from_float(cls, value):
        return _equity_from_float(value)


class JobUpdate(BaseModel):
    """
    Schema for a partial job update.

    Only title, salary and equity may be sent. Anything else, including id
    and companyHandle, is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("equity", mode="before")
    @classmethod
    def equity_from_float(cls, value):
        return _equity_from_float(value)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("title cannot be null")
        return value

    def changes(self) -> dict:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class JobSearch(BaseModel):
    """Schema for the query string of GET /jobs"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title_like: Optional[str] = Field(None, min_length=1, alias="titleLike")
    min_salary: Optional[int] = Field(None, ge=0, alias="minSalary")
    has_equity: Optional[bool] = Field(None, alias="hasEquity")

    def to_filter(self) -> JobFilter:
        return JobFilter(
            title_like=self.title_like,
            min_salary=self.min_salary,
            has_equity=self.has_equity,
        )
