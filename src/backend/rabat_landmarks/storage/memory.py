# rabat_landmarks/storage/memory.py
import copy
import itertools
import logging
import threading
from collections.abc import Mapping
from typing import Any

from rabat_landmarks.exceptions import DuplicateSlugError, DuplicateUsernameError
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


class MemoryLandmarkStore(LandmarkStore):
    """
    プロセス内の辞書（id -> レコード）で保持するストア．
    プロセスが終了すると消えるので，起動のたびに初期データを登録し直す．
    """
    backend_name = "memory"

    def __init__(self, seed: bool = True):
        self._landmarks: dict[int, Landmark] = {} # dictは挿入順を保持する
        self._users: dict[int, User] = {}
        self._landmark_ids = itertools.count(1)
        self._user_ids = itertools.count(1)
        self._lock = threading.Lock()

        if seed:
            for landmark in load_default_landmarks():
                self.create_landmark(landmark)
            logger.info("Seeded in-memory store with %d landmarks", len(self._landmarks))

    def get_landmarks(self) -> list[Landmark]:
        # 保持しているレコードそのものは渡さない（vr_scene_configのdictを書き換えられないように）．
        return [landmark.model_copy(deep=True) for landmark in list(self._landmarks.values())]

    def get_landmark_by_slug(self, slug: str) -> Landmark | None:
        validate_slug(slug)
        found = next((landmark for landmark in list(self._landmarks.values()) if landmark.slug == slug), None)
        return found.model_copy(deep=True) if found is not None else None

    def count_landmarks(self) -> int:
        return len(self._landmarks)

    def create_landmark(self, data: LandmarkCreate | Mapping[str, Any]) -> Landmark:
        landmark_in = validate_landmark_input(data) # 検証に失敗した場合は何も登録しない．
        with self._lock:
            if any(landmark.slug == landmark_in.slug for landmark in self._landmarks.values()):
                raise DuplicateSlugError(landmark_in.slug)
            # 呼び出し側の入力dictとも共有しない．
            landmark = Landmark(id=next(self._landmark_ids), **copy.deepcopy(landmark_in.model_dump()))
            self._landmarks[landmark.id] = landmark
        return landmark.model_copy(deep=True)

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next((user for user in self._users.values() if user.username == username), None)

    def create_user(self, data: UserCreate | Mapping[str, Any]) -> User:
        user_in = validate_user_input(data)
        with self._lock:
            if self.get_user_by_username(user_in.username) is not None:
                raise DuplicateUsernameError(user_in.username)
            user = User(id=next(self._user_ids), **user_in.model_dump())
            self._users[user.id] = user
        return user
