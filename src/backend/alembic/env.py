import sys
from pathlib import Path
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# 1. backend/ をPythonの検索パスに追加（インストールせずに alembic コマンドを使う場合）
sys.path.append(str(Path(__file__).resolve().parent.parent))

# 2. .envファイル・環境変数からDATABASE_URLを読み込む
from rabat_landmarks.core.config import get_settings

# 3. SQLAlchemyモデルをインポートして，Alembicにテーブルの存在を教える．
from rabat_landmarks.db import base # rabat_landmarks/db/base.py で管理したいモデルを全てインポート

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# .iniファイルではなく，Settingsから得たURLをAlembicに設定する．
# 呼び出し側（テストなど）がsqlalchemy.urlを設定済みであればそちらを優先する．
if not config.get_main_option("sqlalchemy.url"):
    database_url = get_settings().DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL (or POSTGRES_*) is not set; nothing to migrate.")
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))

# Interpret the config file for Python logging.
# 既存のロガー（アプリ側）を無効化しないようにする．
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = base.Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    This configures the context with just a URL
    and not an Engine, though an Engine is acceptable
    here as well.  By skipping the Engine creation
    we don't even need a DBAPI to be available.

    Calls to context.execute() here emit the given string to the
    script output.

    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode.

    In this scenario we need to create an Engine
    and associate a connection with the context.

    """
    # alembic_versionテーブルと自分のモデルで定義したテーブルのみを対象とする
    def include_object(object, name, type_, reflected, compare_to):
        if type_ == "table":
            return name == 'alembic_version' or name in target_metadata.tables
        else:
            return True

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_object=include_object
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
