"""End-to-end: YAML schema → generator → compilation pipeline → SQL."""

from __future__ import annotations

import logging

import pytest

from starsql import CompilationPipeline, RenderOptions, SchemaReferenceError, Select, SQLGenerator
from starsql.compiler import generator as generator_module
from starsql.compiler.joins import JoinStep
from starsql.models.schema import Database, ForeignKey
from starsql.parser.resolver import load_database


@pytest.fixture
def yaml_db(sample_schema_yaml: str) -> Database:
    return load_database(sample_schema_yaml)


def _sales_query(db: Database, options: RenderOptions | None = None) -> SQLGenerator:
    gen = SQLGenerator(db, options, from_table="FactSales")
    gen.add_select(Select(table="DimFranchise", column="FranchiseName"))
    gen.add_select(Select(table="DimStore", column="StoreName"))
    gen.add_select(
        Select(table="FactSales", column="Quantity", aggregate="sum", alias="Products Sold")
    )
    return gen


class TestYamlSchemaMatchesCodeSchema:
    def test_same_sql(self, yaml_db: Database, star_db: Database) -> None:
        assert _sales_query(yaml_db).render() == _sales_query(star_db).render()


class TestCompilationPipeline:
    def test_joins_inferred_once(
        self, yaml_db: Database, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[str] = []
        original = generator_module.infer_join_steps

        def counting(database: Database, from_table: str, strict: bool = True) -> list[JoinStep]:
            calls.append(from_table)
            return original(database, from_table, strict=strict)

        monkeypatch.setattr(generator_module, "infer_join_steps", counting)
        result = CompilationPipeline().compile(_sales_query(yaml_db))
        assert calls == ["FactSales"]
        assert result.joined_tables == ["DimFranchise", "DimStore"]
        assert "join DimStore on DimStore.id = FactSales.StoreId" in result.sql

    def test_clean_compile(self, yaml_db: Database) -> None:
        result = CompilationPipeline().compile(_sales_query(yaml_db))
        assert result.sql_valid is True
        assert result.warnings == []
        assert result.from_table == "FactSales"
        assert result.joined_tables == ["DimFranchise", "DimStore"]
        assert result.sql.startswith("select\n")

    def test_unreachable_table_warns(self, yaml_db: Database, caplog: pytest.LogCaptureFixture) -> None:
        gen = SQLGenerator(yaml_db, from_table="FactSales")
        gen.add_select(Select(table="DimRegion", column="RegionName"))
        with caplog.at_level(logging.WARNING, logger="starsql.pipeline"):
            result = CompilationPipeline().compile(gen)
        assert any("not joined" in w for w in result.warnings)
        assert "DimRegion.RegionName" in result.sql
        assert "DimRegion" in caplog.text

    def test_schema_problems_reported_in_lenient_mode(self, yaml_db: Database) -> None:
        yaml_db.get_table("FactSales").add_foreign_key(
            ForeignKey(column="PromoId", target="DimPromo")
        )
        gen = _sales_query(yaml_db, RenderOptions(strict_references=False))
        result = CompilationPipeline(validate_sql=False).compile(gen)
        assert any(w.startswith("UNKNOWN_JOIN_TARGET") for w in result.warnings)
        assert "join DimPromo on DimPromo. = FactSales.PromoId" in result.sql

    def test_strict_mode_raises(self, yaml_db: Database) -> None:
        gen = SQLGenerator(yaml_db)
        gen.add_select(Select(table="FactReturns", column="Quantity"))
        with pytest.raises(SchemaReferenceError):
            CompilationPipeline().compile(gen)

    def test_validation_can_be_disabled(self, yaml_db: Database) -> None:
        result = CompilationPipeline(validate_sql=False).compile(_sales_query(yaml_db))
        assert result.sql_valid is True
