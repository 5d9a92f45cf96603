"""Tests for the alembic migration history."""

from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect

from alembic import command
from alembic.config import Config
from learntrack.database import Base

PROJECT_ROOT = Path(__file__).resolve().parents[3]


@pytest.fixture
def alembic_config(tmp_path: Path) -> Config:
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite:///{tmp_path / 'migrated.db'}")
    return config


class TestMigrations:
    def test_upgrade_creates_every_model_table(self, alembic_config: Config) -> None:
        command.upgrade(alembic_config, "head")

        engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
        try:
            inspector = inspect(engine)
            assert set(inspector.get_table_names()) == {*Base.metadata.tables, "alembic_version"}
            for name, table in Base.metadata.tables.items():
                columns = {column["name"] for column in inspector.get_columns(name)}
                assert columns == set(table.columns.keys()), name
            assert [
                uc["column_names"] for uc in inspector.get_unique_constraints("dependencies")
            ] == [["source_item_id", "target_item_id"]]
        finally:
            engine.dispose()

    def test_downgrade_removes_all_tables(self, alembic_config: Config) -> None:
        command.upgrade(alembic_config, "head")
        command.downgrade(alembic_config, "base")

        engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
        try:
            assert inspect(engine).get_table_names() == ["alembic_version"]
        finally:
            engine.dispose()
