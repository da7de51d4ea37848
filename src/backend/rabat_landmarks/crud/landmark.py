# rabat_landmarks/crud/landmark.py
from sqlalchemy import func
from sqlalchemy.orm import Session
from rabat_landmarks import models
from rabat_landmarks.schemas.landmark import LandmarkCreate

def get_landmarks(db: Session) -> list[models.Landmark]:
    # id順 = 作成順
    return db.query(models.Landmark).order_by(models.Landmark.id).all()

def get_landmark_by_slug(db: Session, slug: str) -> models.Landmark | None:
    return db.query(models.Landmark).filter(models.Landmark.slug == slug).first()

def count_landmarks(db: Session) -> int:
    return db.query(func.count(models.Landmark.id)).scalar()

def create_landmark(db: Session, landmark: LandmarkCreate) -> models.Landmark:
    """
    1件登録してflushする．コミットは呼び出し側で行う．
    """
    db_landmark = models.Landmark(**landmark.model_dump())
    db.add(db_landmark)
    db.flush() # ここでidが採番され，一意制約違反もここで検出される．
    return db_landmark

def bulk_create_landmarks(db: Session, landmarks: list[LandmarkCreate]) -> int:
    db.add_all([models.Landmark(**landmark.model_dump()) for landmark in landmarks])
    db.flush()
    return len(landmarks)
