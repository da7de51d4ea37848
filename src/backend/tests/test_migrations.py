import runpy
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from rabat_landmarks.db.session import create_db_engine
from rabat_landmarks.storage import DatabaseLandmarkStore

from conftest import SEEDED_COUNT

BACKEND_DIR = Path(__file__).resolve().parents[1]


def test_alembic_upgrade_matches_models(tmp_path):
    url = f"sqlite:///{tmp_path / 'landmarks.db'}"
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", url)

    command.upgrade(config, "head")

    engine = create_db_engine(url)
    inspector = inspect(engine)
    assert {"landmarks", "users", "alembic_version"} <= set(inspector.get_table_names())
    slug_indexes = [index for index in inspector.get_indexes("landmarks") if index["column_names"] == ["slug"]]
    assert slug_indexes and slug_indexes[0]["unique"]

    # マイグレーション済みのテーブルにも初期データを登録できる
    store = DatabaseLandmarkStore(engine)
    assert store.initialize() == SEEDED_COUNT
    engine.dispose()


def test_init_db_script_is_idempotent(tmp_path, capsys):
    url = f"sqlite:///{tmp_path / 'landmarks.db'}"
    init_db = runpy.run_path(str(BACKEND_DIR / "scripts" / "init_db.py"))

    assert init_db["main"](url) == 0
    assert init_db["main"](url) == 0
    output = capsys.readouterr().out
    assert f"合計{SEEDED_COUNT}件" in output

    engine = create_db_engine(url)
    assert DatabaseLandmarkStore(engine).initialize() == 0
    engine.dispose()
