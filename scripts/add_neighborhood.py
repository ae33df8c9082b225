#!/usr/bin/env python3
"""
Cadastrar bairros diretamente na base JSON.

Uso:
  python scripts/add_neighborhood.py --name "Vila Olímpia" --value 45000
  python scripts/add_neighborhood.py --seed data/neighborhood.default.json
"""
from __future__ import annotations

import argparse
import sys
from decimal import Decimal, InvalidOperation

from neighborhood_api.core.config import get_settings
from neighborhood_api.core.logging_config import setup_logging
from neighborhood_api.domain.errors import DomainError
from neighborhood_api.domain.neighborhoods import Neighborhood
from neighborhood_api.repositories.neighborhood_repository import NeighborhoodRepository
from neighborhood_api.services.neighborhood_service import NeighborhoodService


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar bairro na base JSON")
    ap.add_argument("--name", help="Nome do bairro (ex.: Moema)")
    ap.add_argument("--value", help="Valor do metro quadrado (ex.: 12500.50)")
    ap.add_argument("--seed", help="Arquivo JSON que substitui toda a base")
    ap.add_argument("--db", help="Arquivo da base (default: DATA_DIR/NEIGHBORHOOD_DB_FILE)")
    args = ap.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    repo = NeighborhoodRepository(args.db or settings.neighborhood_db_path)
    repo.start_database()

    if args.seed:
        records = repo.load_defaults(args.seed)
        print(f"OK: {len(records)} bairros carregados em {repo.path}")
        return

    if not args.name:
        raise SystemExit("Informe --name ou --seed")
    value = None
    if args.value:
        try:
            value = Decimal(args.value.strip())
        except InvalidOperation:
            raise SystemExit("Valor deve ser numerico")

    svc = NeighborhoodService(repo)
    try:
        created = svc.create_neighborhood(Neighborhood(id=None, name_district=args.name.strip(), value_district_m2=value))
    except DomainError as exc:
        raise SystemExit(exc.message)
    print("OK: bairro cadastrado")
    print(f"  ID: {created.id}")
    print(f"  Nome: {created.name_district}")
    print(f"  Valor m2: {created.value_district_m2}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
