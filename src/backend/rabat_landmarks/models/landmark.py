# rabat_landmarks/models/landmark.py
from sqlalchemy import JSON, Column, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from rabat_landmarks.db.base_class import Base

class Landmark(Base):
    __tablename__ = "landmarks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False) # URL用の識別子．作成後は変更しない．
    description = Column(Text, nullable=False)
    short_description = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    location = Column(String, nullable=False)
    opening_hours = Column(String, nullable=False)

    # 緯度経度は文字列で保持（空間検索はしないのでGeography型は使わない．）
    latitude = Column(String, nullable=False)
    longitude = Column(String, nullable=False)

    vr_model_url = Column(String, nullable=True)
    vr_scene_config = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True) # PostgreSQLではJSONB
