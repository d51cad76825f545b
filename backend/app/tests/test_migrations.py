import importlib.util
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

VERSIONS = Path(__file__).resolve().parents[2] / "alembic" / "versions"


def load_revision():
    path = VERSIONS / "20261019_01_script_tables.py"
    spec = importlib.util.spec_from_file_location("script_tables_revision", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_revision_matches_models():
    from app.database import Base

    revision = load_revision()
    engine = create_engine("sqlite://")
    with engine.begin() as conn:
        ctx = MigrationContext.configure(conn)
        with Operations.context(ctx):
            revision.upgrade()
        inspector = inspect(conn)
        tables = set(inspector.get_table_names())
        assert {"scripts", "script_versions", "script_elements"} <= tables
        for name in ("scripts", "script_versions", "script_elements"):
            migrated = {c["name"] for c in inspector.get_columns(name)}
            modelled = {c.name for c in Base.metadata.tables[name].columns}
            assert migrated == modelled, name

        with Operations.context(ctx):
            revision.downgrade()
        assert not {"scripts", "script_versions", "script_elements"} & set(inspect(conn).get_table_names())
