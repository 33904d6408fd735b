"""Shared test fixtures for StarSQL."""

from __future__ import annotations

import pytest

from starsql.models.schema import Database, ForeignKey, Table
from starsql.parser.loader import TrackedLoader
from starsql.parser.resolver import SchemaResolver


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def resolver() -> SchemaResolver:
    return SchemaResolver()


@pytest.fixture
def star_db() -> Database:
    """FactSales referencing DimFranchise and DimStore, in that order."""
    db = Database(name="StarDB")
    sales = Table(name="FactSales", primary_key="id")
    sales.add_foreign_key(ForeignKey(column="FranchiseId", target="DimFranchise"))
    sales.add_foreign_key(ForeignKey(column="StoreId", target="DimStore"))
    db.add_table(sales)
    db.add_table(Table(name="DimFranchise", primary_key="id"))
    db.add_table(Table(name="DimStore", primary_key="id"))
    return db


@pytest.fixture
def sample_schema_yaml() -> str:
    return SAMPLE_SCHEMA_YAML


SAMPLE_SCHEMA_YAML = """\
name: StarDB

tables:
  FactSales:
    primaryKey: id
    foreignKeys:
      - column: FranchiseId
        references: DimFranchise
      - column: StoreId
        references: DimStore

  DimFranchise:
    primaryKey: id

  DimStore:
    primaryKey: id
"""
