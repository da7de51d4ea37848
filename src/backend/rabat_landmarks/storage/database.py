# rabat_landmarks/storage/database.py
import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from rabat_landmarks.crud import landmark as crud_landmark
from rabat_landmarks.crud import user as crud_user
from rabat_landmarks.db.base import Base
from rabat_landmarks.db.session import make_session_factory
from rabat_landmarks.exceptions import BackingUnavailableError, DuplicateSlugError, DuplicateUsernameError
from rabat_landmarks.schemas.landmark import Landmark, LandmarkCreate
from rabat_landmarks.schemas.user import User, UserCreate
from rabat_landmarks.storage.base import (
    LandmarkStore,
    load_default_landmarks,
    validate_landmark_input,
    validate_slug,
    validate_user_input,
)

logger = logging.getLogger(__name__)

# pg_advisory_xact_lockのキー（このアプリの初期化処理専用）
BOOTSTRAP_LOCK_KEY = 7261_0001


class DatabaseLandmarkStore(LandmarkStore):
    """
    RDB（usersテーブル・landmarksテーブル）を裏側に持つストア．

    initialize()が完了するまでは，読み取り系の操作は空の結果を返す．
    API層がリクエストを受け付ける前にinitialize()を同期的に呼ぶこと．
    """
    backend_name = "database"

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = make_session_factory(engine)
        self._init_lock = threading.Lock()
        self._ready = False

    @property
    def is_ready(self) -> bool:
        return self._ready

    def initialize(self, seed: bool = True) -> int:
        """
        テーブルを作成し，landmarksテーブルが空であれば初期データを登録する．
        新たに登録した件数を返す（既に登録済みなら0）．
        """
        # 初期データの検証はDBに触る前に行う．ここでのValidationErrorはそのまま送出する．
        defaults = load_default_landmarks() if seed else []

        with self._init_lock:
            try:
                inserted = self._bootstrap(defaults)
            except IntegrityError:
                # 別プロセスが先に登録した（スラッグの一意制約違反）．登録済みとして扱う．
                logger.warning("Seed skipped: landmarks were inserted concurrently by another process")
                inserted = 0
            except SQLAlchemyError as e:
                raise BackingUnavailableError(f"Database initialization failed ({e.__class__.__name__})") from e
            self._ready = True

        if inserted:
            logger.info("Seeded landmarks table with %d rows", inserted)
        return inserted

    def _bootstrap(self, defaults: list[LandmarkCreate]) -> int:
        # 「テーブル作成 → 空かどうかの確認 → 登録」を1つのトランザクションで行う．
        # 途中までしか登録されていない状態は外から見えない．
        with self.SessionLocal.begin() as db:
            self._acquire_bootstrap_lock(db)
            Base.metadata.create_all(bind=db.connection())
            if not defaults:
                return 0
            existing = crud_landmark.count_landmarks(db)
            if existing > 0:
                logger.info("landmarks table already has %d rows, skipping seed", existing)
                return 0
            return crud_landmark.bulk_create_landmarks(db, defaults)

    def _acquire_bootstrap_lock(self, db: Session) -> None:
        if self.engine.dialect.name == "postgresql":
            # トランザクション終了時に解放される．同時に起動したプロセスのCREATE TABLEと初期データ登録が直列化される．
            db.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": BOOTSTRAP_LOCK_KEY})

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            raise BackingUnavailableError(f"Database query failed ({e.__class__.__name__})") from e
        finally:
            db.close()

    def get_landmarks(self) -> list[Landmark]:
        if not self._ready:
            return []
        with self._session() as db:
            return [Landmark.model_validate(row) for row in crud_landmark.get_landmarks(db)]

    def get_landmark_by_slug(self, slug: str) -> Landmark | None:
        validate_slug(slug)
        if not self._ready:
            return None
        with self._session() as db:
            row = crud_landmark.get_landmark_by_slug(db, slug)
            return Landmark.model_validate(row) if row is not None else None

    def count_landmarks(self) -> int:
        if not self._ready:
            return 0
        with self._session() as db:
            return crud_landmark.count_landmarks(db)

    def create_landmark(self, data: LandmarkCreate | Mapping[str, Any]) -> Landmark:
        landmark_in = validate_landmark_input(data)
        with self._session() as db:
            try:
                db_landmark = crud_landmark.create_landmark(db, landmark_in)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateSlugError(landmark_in.slug) from e
            return Landmark.model_validate(db_landmark)

    def get_user(self, user_id: int) -> User | None:
        if not self._ready:
            return None
        with self._session() as db:
            row = crud_user.get_user(db, user_id)
            return User.model_validate(row) if row is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        if not self._ready:
            return None
        with self._session() as db:
            row = crud_user.get_user_by_username(db, username)
            return User.model_validate(row) if row is not None else None

    def create_user(self, data: UserCreate | Mapping[str, Any]) -> User:
        user_in = validate_user_input(data)
        with self._session() as db:
            try:
                db_user = crud_user.create_user(db, user_in)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateUsernameError(user_in.username) from e
            return User.model_validate(db_user)
