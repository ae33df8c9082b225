"""Request/response bodies for the neighborhood endpoints."""
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from neighborhood_api.domain.neighborhoods import Neighborhood


class NeighborhoodCreate(BaseModel):
    # Field rules are enforced by validate_neighborhood so the API answers
    # with its own messages instead of pydantic's.
    nameDistrict: Optional[str] = None
    valueDistrictM2: Optional[Decimal] = None

    model_config = ConfigDict(extra="ignore")

    def to_domain(self) -> Neighborhood:
        return Neighborhood(id=None, name_district=self.nameDistrict, value_district_m2=self.valueDistrictM2)


class NeighborhoodRead(BaseModel):
    id: UUID
    nameDistrict: str
    valueDistrictM2: float

    @classmethod
    def from_domain(cls, neighborhood: Neighborhood) -> "NeighborhoodRead":
        return cls(
            id=neighborhood.id,
            nameDistrict=neighborhood.name_district,
            valueDistrictM2=float(neighborhood.value_district_m2),
        )


class NeighborhoodPage(BaseModel):
    page: int
    totalPages: int
    neighborhoods: List[NeighborhoodRead]
