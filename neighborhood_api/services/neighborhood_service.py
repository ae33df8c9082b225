"""Neighborhood use cases (create, paginate, lookup, delete)."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional
from uuid import UUID

from neighborhood_api.domain.errors import (
    DuplicateNameError,
    InvalidParameterError,
    NeighborhoodNotFoundError,
)
from neighborhood_api.domain.neighborhoods import Neighborhood, validate_neighborhood
from neighborhood_api.repositories.neighborhood_repository import NeighborhoodRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Bairro não encontrado"
INVALID_PARAMETER_MESSAGE = "Limite ou página inválida"
DUPLICATE_SUFFIX = " já está cadastrado na base de dados"


def compute_offset(page: int, limit: int) -> int:
    """Zero-based skip count for ``page`` (pages start at 1; 0 and 1 are the first page)."""
    return 0 if page <= 1 else (page - 1) * limit


class NeighborhoodService:
    """Orchestrates validation and the repository; keeps no state besides a write lock."""

    def __init__(self, repository: NeighborhoodRepository) -> None:
        self.repository = repository
        self._lock = threading.Lock()

    def create_neighborhood(self, candidate: Neighborhood) -> Neighborhood:
        validate_neighborhood(candidate.name_district, candidate.value_district_m2)
        with self._lock:
            existing = next(
                (n for n in self.repository.read() if n.name_district == candidate.name_district),
                None,
            )
            if existing is not None:
                logger.info("Bairro duplicado rejeitado: %s", candidate.name_district)
                raise DuplicateNameError(f"{candidate.name_district}{DUPLICATE_SUFFIX}")
            created = Neighborhood(
                id=uuid.uuid4(),
                name_district=candidate.name_district,
                value_district_m2=candidate.value_district_m2,
            )
            self.repository.add(created)
        logger.info("Bairro cadastrado: %s (%s)", created.name_district, created.id)
        return created

    def list_neighborhood(self, page: Optional[int], limit: Optional[int]) -> list[Neighborhood]:
        if page is None or page < 0 or limit is None or limit < 0:
            raise InvalidParameterError(INVALID_PARAMETER_MESSAGE)
        return self.repository.read_page(compute_offset(page, limit), limit)

    def get_neighborhood_by_id(self, neighborhood_id: UUID) -> Neighborhood:
        neighborhood = self.repository.find(neighborhood_id)
        if neighborhood is None:
            raise NeighborhoodNotFoundError(NOT_FOUND_MESSAGE)
        return neighborhood

    def get_total_pages(self, limit: Optional[int]) -> int:
        if limit is None or limit <= 0:
            return 0
        total = self.repository.count()
        return -(-total // limit)

    def delete_neighborhood_by_id(self, neighborhood_id: UUID) -> None:
        with self._lock:
            neighborhood = self.get_neighborhood_by_id(neighborhood_id)
            self.repository.delete(neighborhood)
        logger.info("Bairro removido: %s (%s)", neighborhood.name_district, neighborhood.id)

    def validate_exists(self, name: str) -> Neighborhood:
        """Ensure a record named exactly ``name`` exists; used by callers that reference districts by name."""
        neighborhood = self.repository.find_by_name(name)
        if neighborhood is None:
            raise NeighborhoodNotFoundError(NOT_FOUND_MESSAGE)
        return neighborhood
