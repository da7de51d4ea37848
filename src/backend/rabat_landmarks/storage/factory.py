# rabat_landmarks/storage/factory.py
import logging

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from rabat_landmarks.core.config import Settings
from rabat_landmarks.db.session import create_db_engine
from rabat_landmarks.exceptions import BackingUnavailableError
from rabat_landmarks.storage.base import LandmarkStore
from rabat_landmarks.storage.database import DatabaseLandmarkStore
from rabat_landmarks.storage.memory import MemoryLandmarkStore

logger = logging.getLogger(__name__)

def create_store(settings: Settings) -> LandmarkStore:
    """
    設定に応じてストアを作成する．
    DATABASE_URLがあればRDB，無ければメモリ．RDBに接続できない場合はメモリにフォールバックする．
    """
    if not settings.DATABASE_URL:
        logger.info("DATABASE_URL is not set, using in-memory landmark store")
        return MemoryLandmarkStore()

    # ログには接続情報を出さない（パスワードを含むため）．
    try:
        engine = create_db_engine(settings.DATABASE_URL, connect_timeout=settings.DB_CONNECT_TIMEOUT)
    except SQLAlchemyError as e:
        logger.error("Invalid DATABASE_URL (%s), falling back to in-memory store", e.__class__.__name__)
        return MemoryLandmarkStore()

    store = DatabaseLandmarkStore(engine)
    try:
        store.initialize()
    except BackingUnavailableError as e:
        logger.error("Database backing unavailable, falling back to in-memory store: %s", e)
        engine.dispose()
        return MemoryLandmarkStore()

    logger.info("Using database landmark store (%s)", engine.dialect.name)
    return store

# FastAPIのDependsで使うためのストア取得関数
def get_store(request: Request) -> LandmarkStore:
    return request.app.state.store
