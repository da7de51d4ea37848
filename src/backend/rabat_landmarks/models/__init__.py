# rabat_landmarks/models/__init__.py
# __init__.py に from .landmark import Landmark と書くことで，models/landmark.pyの中のLandmarkクラスを，modelsパッケージの直下にあるかのように昇格させることができます．
# このおかげでcrudなどにおいて，from rabat_landmarks import models と書けば models.Landmark とテーブル定義を指定できる．
from .landmark import Landmark
from .user import User
