# rabat_landmarks/schemas/landmark.py
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# 小文字英数字をハイフン1つで区切ったもの．例：hassan-tower
SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'

def _parse_degrees(value: str, limit: int, label: str) -> str:
    try:
        degrees = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"{label} must be a decimal number") from None
    if not degrees.is_finite() or abs(degrees) > limit:
        raise ValueError(f"{label} must be within [-{limit}, {limit}]")
    return value

class LandmarkBase(BaseModel):
    # Python側はsnake_case，JSON側はcamelCase（shortDescriptionなど）．どちらの名前でも受け付ける．
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=SLUG_PATTERN)
    description: str = Field(min_length=1)
    short_description: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    location: str = Field(min_length=1) # 住所（自由記述）
    opening_hours: str = Field(min_length=1)

    # 緯度経度は文字列のまま保持する（例："34.0242"）．
    latitude: str
    longitude: str

    vr_model_url: str | None = None
    # カメラ初期位置・光の強さ・環境カテゴリなど．中身は解釈しない．
    vr_scene_config: dict[str, Any] | None = None

    @field_validator('latitude')
    @classmethod
    def validate_latitude(cls, value: str) -> str:
        return _parse_degrees(value, 90, 'latitude')

    @field_validator('longitude')
    @classmethod
    def validate_longitude(cls, value: str) -> str:
        return _parse_degrees(value, 180, 'longitude')

# ストアへの登録用（idはストアが採番する）
class LandmarkCreate(LandmarkBase):
    pass

# APIレスポンス・ストアの戻り値．一度作成したら変更しない．
class Landmark(LandmarkBase):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True, # SQLAlchemyモデル（models/landmark.py）から自動で変換できるようにする設定
        frozen=True,
    )

    id: int
