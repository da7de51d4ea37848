# rabat_landmarks/db/base.py
# create_all()やAlembicがテーブルを認識できるように，Baseと全てのモデルをここでまとめてimportする．
from rabat_landmarks.db.base_class import Base  # noqa: F401
from rabat_landmarks.models import Landmark, User  # noqa: F401
