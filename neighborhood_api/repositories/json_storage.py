"""
JSON-file persistence adapter.

Each logical table lives in its own file holding a JSON array. Reads load the
whole array; every mutation rewrites the whole file.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
import json
import logging
import os
import tempfile
import threading

from neighborhood_api.domain.errors import DatabaseReadError, DatabaseWriteError

logger = logging.getLogger(__name__)


def _json_default(value):
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonTableStorage:
    """Load/save a JSON array stored at ``path``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        # Reentrant so repositories can hold it across a load + save
        self.lock = threading.RLock()

    def exists(self) -> bool:
        return self.path.exists()

    def create(self) -> bool:
        """Create the parent directory and an empty table. Returns True when a file was written."""
        with self.lock:
            if self.exists():
                return False
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.error("Falha ao criar diretorio %s: %s", self.path.parent, exc)
                raise DatabaseWriteError(f"Falha ao criar a base de dados {self.path.name}") from exc
            self.save([])
            logger.info("Base de dados criada em %s", self.path)
            return True

    def load(self) -> list:
        with self.lock:
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f, parse_float=Decimal)
            except FileNotFoundError as exc:
                logger.error("Arquivo da base de dados ausente: %s", self.path)
                raise DatabaseReadError(f"Base de dados {self.path.name} nao encontrada") from exc
            except (OSError, ValueError) as exc:
                logger.error("Falha ao ler %s: %s", self.path, exc)
                raise DatabaseReadError(f"Falha ao ler a base de dados {self.path.name}") from exc
        if not isinstance(data, list):
            logger.error("Conteudo inesperado em %s: %s", self.path, type(data).__name__)
            raise DatabaseReadError(f"Base de dados {self.path.name} corrompida")
        return data

    def save(self, rows: list) -> None:
        with self.lock:
            tmp_name = None
            try:
                payload = json.dumps(rows, ensure_ascii=False, indent=2, default=_json_default)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except (OSError, TypeError, ValueError) as exc:
                logger.error("Falha ao gravar %s: %s", self.path, exc)
                if tmp_name and os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise DatabaseWriteError(f"Falha ao gravar a base de dados {self.path.name}") from exc
