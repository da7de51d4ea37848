# rabat_landmarks/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

def create_db_engine(database_url: str, connect_timeout: int = 5) -> Engine:
    """
    DATABASE_URLからエンジンを作成する．
    接続はこの時点では張られない（最初のクエリ時に接続される）．
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        # テスト・ローカル用．FastAPIはスレッドプールで同期エンドポイントを実行するので，スレッドチェックを外す．
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # インメモリDBは接続ごとに別物になるため，1本の接続を使い回す．
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,
        connect_args={"connect_timeout": connect_timeout},
    )

def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
