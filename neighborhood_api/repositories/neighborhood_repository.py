"""Neighborhood table backed by a JSON file."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional
from uuid import UUID
import logging

from neighborhood_api.domain.errors import DatabaseReadError
from neighborhood_api.domain.neighborhoods import Neighborhood
from neighborhood_api.repositories.json_storage import JsonTableStorage

logger = logging.getLogger(__name__)


class NeighborhoodRepository:
    """CRUD helpers over the neighborhood JSON table."""

    def __init__(self, path: Path | str) -> None:
        self.storage = JsonTableStorage(path)

    @property
    def path(self) -> Path:
        return self.storage.path

    # ------------------------- bootstrap -------------------------
    def start_database(self) -> bool:
        return self.storage.create()

    def load_defaults(self, seed_path: Path | str) -> list[Neighborhood]:
        """Replace the table with the records found in ``seed_path``."""
        records = NeighborhoodRepository(seed_path).read()
        self.write_all(records)
        logger.info("Base %s carregada com %d bairros de %s", self.path.name, len(records), seed_path)
        return records

    def write_all(self, records: Iterable[Neighborhood]) -> None:
        self.storage.save([n.to_record() for n in records])

    # -------------------------- reads ----------------------------
    def read(self) -> list[Neighborhood]:
        rows = self.storage.load()
        try:
            return [Neighborhood.from_record(row) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            logger.error("Registro invalido em %s: %s", self.path, exc)
            raise DatabaseReadError(f"Base de dados {self.path.name} corrompida") from exc

    def read_page(self, offset: int, limit: int) -> list[Neighborhood]:
        if offset < 0 or limit < 0:
            raise ValueError("offset and limit must be non-negative")
        return self.read()[offset:offset + limit]

    def count(self) -> int:
        return len(self.read())

    def find(self, neighborhood_id: UUID) -> Optional[Neighborhood]:
        for neighborhood in self.read():
            if neighborhood.id == neighborhood_id:
                return neighborhood
        return None

    def find_by_name(self, name: str) -> Optional[Neighborhood]:
        for neighborhood in self.read():
            if neighborhood.name_district == name:
                return neighborhood
        return None

    # ------------------------- writes ----------------------------
    def add(self, neighborhood: Neighborhood) -> Neighborhood:
        with self.storage.lock:
            records = self.read()
            records.append(neighborhood)
            self.write_all(records)
        return neighborhood

    def delete(self, neighborhood: Neighborhood) -> None:
        with self.storage.lock:
            records = [n for n in self.read() if n.id != neighborhood.id]
            self.write_all(records)
