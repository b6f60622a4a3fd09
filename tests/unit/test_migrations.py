from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cookbook.app.domain.errors import MigrationError, StoreError
from cookbook.app.domain.models import RecipeDraft, RecipeStatus
from cookbook.app.infra.db.migrations import (
    MIGRATIONS,
    MIGRATIONS_TABLE,
    Migration,
    apply_migrations,
    pending_migrations,
)
from cookbook.app.infra.db.seed import SEED_RECIPES, seed_sample_content


def create_client(applied: list[int]) -> MagicMock:
    client = MagicMock()
    table = client.table.return_value
    table.select.return_value.execute.return_value = MagicMock(
        data=[{"version": version} for version in applied]
    )
    return client


def executed_sql(client: MagicMock) -> list[str]:
    return [call.args[1]["query"] for call in client.rpc.call_args_list]


class TestPendingMigrations:
    def test_versions_are_unique_and_ordered(self) -> None:
        versions = [migration.version for migration in MIGRATIONS]

        assert versions == sorted(set(versions))

    def test_skips_applied_and_sorts(self) -> None:
        migrations = [
            Migration(3, "c", "select 3"),
            Migration(1, "a", "select 1"),
            Migration(2, "b", "select 2"),
        ]

        assert [m.version for m in pending_migrations({1}, migrations)] == [2, 3]

    def test_nothing_pending(self) -> None:
        assert pending_migrations({m.version for m in MIGRATIONS}) == []


class TestApplyMigrations:
    def test_fresh_database_applies_everything_in_order(self) -> None:
        client = create_client(applied=[])

        done = apply_migrations(client)

        assert done == [m.version for m in MIGRATIONS]
        sql = executed_sql(client)
        assert MIGRATIONS_TABLE in sql[0]
        assert sql[1:] == [m.sql for m in MIGRATIONS]
        inserted = [call.args[0] for call in client.table.return_value.insert.call_args_list]
        assert inserted == [{"version": m.version, "name": m.name} for m in MIGRATIONS]

    def test_up_to_date_database_runs_nothing(self) -> None:
        client = create_client(applied=[m.version for m in MIGRATIONS])

        assert apply_migrations(client) == []
        assert len(executed_sql(client)) == 1
        client.table.return_value.insert.assert_not_called()

    def test_failure_stops_at_the_failing_version(self) -> None:
        client = create_client(applied=[1])
        failing_sql = MIGRATIONS[1].sql

        def rpc(name: str, params: dict) -> MagicMock:
            request = MagicMock()
            if params["query"] == failing_sql:
                request.execute.side_effect = ConnectionError("connection reset")
            return request

        client.rpc.side_effect = rpc

        with pytest.raises(MigrationError) as exc_info:
            apply_migrations(client)

        assert exc_info.value.version == 2
        assert isinstance(exc_info.value, StoreError)
        assert MIGRATIONS[2].sql not in executed_sql(client)
        client.table.return_value.insert.assert_not_called()

    def test_tracking_table_failure(self) -> None:
        client = MagicMock()
        client.rpc.return_value.execute.side_effect = TimeoutError("timed out")

        with pytest.raises(MigrationError) as exc_info:
            apply_migrations(client)

        assert exc_info.value.version == 0


class TestSeed:
    def test_empty_table_gets_starter_recipes(self, recipe_repo) -> None:
        inserted = seed_sample_content(recipe_repo)

        assert inserted == len(SEED_RECIPES) == 3
        assert all(r.status == RecipeStatus.APPROVED for r in recipe_repo.rows.values())
        titles = {r.title for r in recipe_repo.rows.values()}
        assert "Slow-Simmered Sunday Sauce" in titles

    def test_existing_content_is_left_alone(self, recipe_repo) -> None:
        recipe_repo.create_recipe(RecipeDraft(title="Mine", description="d"), RecipeStatus.PENDING)

        assert seed_sample_content(recipe_repo) == 0
        assert len(recipe_repo.rows) == 1

    def test_running_twice_does_not_duplicate(self, recipe_repo) -> None:
        seed_sample_content(recipe_repo)
        seed_sample_content(recipe_repo)

        assert len(recipe_repo.rows) == 3
