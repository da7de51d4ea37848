# rabat_landmarks/storage/base.py
"""
ランドマークストアの共通インターフェース．

API層はこのインターフェースだけに依存し，裏側がメモリ（MemoryLandmarkStore）か
RDB（DatabaseLandmarkStore）かを意識しない．
"""
import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from rabat_landmarks.data.default_landmarks import DEFAULT_LANDMARKS
from rabat_landmarks.exceptions import LandmarkNotFoundError, ValidationError
from rabat_landmarks.schemas.landmark import Landmark, LandmarkCreate
from rabat_landmarks.schemas.user import User, UserCreate


def validate_landmark_input(data: LandmarkCreate | Mapping[str, Any]) -> LandmarkCreate:
    """Coerce caller input into a LandmarkCreate, raising ValidationError on a contract violation."""
    if isinstance(data, LandmarkCreate):
        return data
    try:
        return LandmarkCreate.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid landmark input ({e.error_count()} error(s))", errors=e.errors()) from e


def validate_user_input(data: UserCreate | Mapping[str, Any]) -> UserCreate:
    if isinstance(data, UserCreate):
        return data
    try:
        return UserCreate.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid user input ({e.error_count()} error(s))", errors=e.errors()) from e


def validate_slug(slug: str) -> str:
    if not isinstance(slug, str) or not slug:
        raise ValidationError("slug must be a non-empty string")
    return slug


def load_default_landmarks() -> list[LandmarkCreate]:
    """
    初期データを検証して返す．ここでのValidationErrorは起動時に致命的エラーとして扱う．
    """
    return [validate_landmark_input(copy.deepcopy(item)) for item in DEFAULT_LANDMARKS]


class LandmarkStore(ABC):
    backend_name: str

    @abstractmethod
    def get_landmarks(self) -> list[Landmark]:
        """全件を作成順で返す．"""

    @abstractmethod
    def get_landmark_by_slug(self, slug: str) -> Landmark | None:
        """スラッグの完全一致（大文字小文字を区別）で検索する．"""

    @abstractmethod
    def create_landmark(self, data: LandmarkCreate | Mapping[str, Any]) -> Landmark:
        """次のidを採番して登録し，登録後のレコードを返す．"""

    @abstractmethod
    def count_landmarks(self) -> int:
        ...

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    def create_user(self, data: UserCreate | Mapping[str, Any]) -> User:
        ...

    def require_landmark(self, slug: str) -> Landmark:
        landmark = self.get_landmark_by_slug(slug)
        if landmark is None:
            raise LandmarkNotFoundError(slug)
        return landmark
