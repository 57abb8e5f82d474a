#!/usr/bin/env python3
"""Upgrade every service schema to its latest Alembic revision.

    python scripts/migrate.py                 # catalog and order
    python scripts/migrate.py order --url postgresql+psycopg://...
"""
import argparse
from pathlib import Path

from alembic import command
from alembic.config import Config

SERVICES_DIR = Path(__file__).resolve().parents[1] / "services"
SERVICES = ["catalog", "order"]


def alembic_config(service: str, url: str | None = None) -> Config:
    service_dir = SERVICES_DIR / service
    cfg = Config(str(service_dir / "alembic.ini"))
    cfg.set_main_option("script_location", str(service_dir / "alembic"))
    if url:
        cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def upgrade(service: str, url: str | None = None, revision: str = "head") -> None:
    command.upgrade(alembic_config(service, url), revision)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("services", nargs="*", default=SERVICES, help=f"any of {SERVICES}")
    ap.add_argument("--url", help="database URL; defaults to each service's POSTGRES_DSN setting")
    args = ap.parse_args()
    unknown = set(args.services) - set(SERVICES)
    if unknown:
        ap.error(f"unknown services: {sorted(unknown)}")
    for service in args.services:
        upgrade(service, args.url)


if __name__ == "__main__":
    main()
