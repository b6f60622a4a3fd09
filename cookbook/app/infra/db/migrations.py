# cookbook/app/infra/db/migrations.py
"""
Versioned schema migrations for the content store.

Each migration runs once, in order, and is recorded in ``schema_migrations``.
SQL is executed through the ``exec_sql(query text)`` Postgres function exposed
as a Supabase RPC; it must exist in the database (security definer, service
role only):

    create or replace function exec_sql(query text) returns void
    language plpgsql security definer as $$ begin execute query; end $$;
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from supabase import Client

from cookbook.app.domain.errors import MigrationError
from cookbook.app.infra.db.supabase_content_repo import STORE_ERRORS

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"

_CREATE_MIGRATIONS_TABLE = """
create table if not exists schema_migrations (
    version integer primary key,
    name text not null,
    applied_at timestamptz not null default now()
)
"""


@dataclass(frozen=True)
class Migration:
    version: int
    name: str
    sql: str


MIGRATIONS: list[Migration] = [
    Migration(
        version=1,
        name="create_recipes",
        sql="""
        create table if not exists recipes (
            id bigint generated by default as identity primary key,
            title varchar(255) not null,
            description text not null,
            cook_time varchar(50),
            servings varchar(50),
            ingredients jsonb not null default '[]'::jsonb,
            instructions jsonb not null default '[]'::jsonb,
            image_url text,
            created_at timestamptz not null default now(),
            updated_at timestamptz not null default now()
        )
        """,
    ),
    Migration(
        version=2,
        name="recipe_moderation",
        sql="""
        alter table recipes
            add column if not exists status varchar(20) not null default 'pending',
            add column if not exists submitter_name varchar(255),
            add column if not exists submitter_email varchar(255),
            add column if not exists submitter_notes text;
        alter table recipes drop constraint if exists recipes_status_check;
        alter table recipes add constraint recipes_status_check
            check (status in ('pending', 'approved', 'rejected'));
        create index if not exists recipes_status_created_at_idx
            on recipes (status, created_at desc);
        """,
    ),
    Migration(
        version=3,
        name="create_family_stories",
        sql="""
        create table if not exists family_stories (
            id bigint generated by default as identity primary key,
            title varchar(255) not null,
            description text,
            video_url text not null,
            status varchar(20) not null default 'draft'
                check (status in ('draft', 'published')),
            created_at timestamptz not null default now(),
            updated_at timestamptz not null default now()
        );
        create index if not exists family_stories_status_created_at_idx
            on family_stories (status, created_at desc);
        """,
    ),
]


def _exec_sql(client: Client, sql: str) -> None:
    client.rpc("exec_sql", {"query": sql}).execute()


def applied_versions(client: Client) -> set[int]:
    result = client.table(MIGRATIONS_TABLE).select("version").execute()
    return {int(row["version"]) for row in (result.data or [])}


def pending_migrations(applied: set[int], migrations: list[Migration] = MIGRATIONS) -> list[Migration]:
    return sorted(
        (migration for migration in migrations if migration.version not in applied),
        key=lambda migration: migration.version,
    )


def apply_migrations(client: Client, migrations: list[Migration] = MIGRATIONS) -> list[int]:
    """
    Bring the schema up to date.

    Args:
        client: Supabase client with the service role key
        migrations: Migration list (defaults to MIGRATIONS)

    Returns:
        Versions applied by this call, in order

    Raises:
        MigrationError: If any step fails; later migrations are not attempted
    """
    try:
        _exec_sql(client, _CREATE_MIGRATIONS_TABLE)
        applied = applied_versions(client)
    except STORE_ERRORS as error:
        raise MigrationError(0, str(error)) from error

    done: list[int] = []
    for migration in pending_migrations(applied, migrations):
        logger.info("Applying migration %d (%s)", migration.version, migration.name)
        try:
            _exec_sql(client, migration.sql)
            client.table(MIGRATIONS_TABLE).insert(
                {"version": migration.version, "name": migration.name}
            ).execute()
        except STORE_ERRORS as error:
            logger.error("Migration %d failed: %s", migration.version, error)
            raise MigrationError(migration.version, str(error)) from error
        done.append(migration.version)

    if done:
        logger.info("Schema migrated to version %d", done[-1])
    else:
        logger.info("Schema up to date")
    return done
