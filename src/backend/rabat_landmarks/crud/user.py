# rabat_landmarks/crud/user.py
from sqlalchemy.orm import Session
from rabat_landmarks import models
from rabat_landmarks.schemas.user import UserCreate

def get_user(db: Session, user_id: int) -> models.User | None:
    return db.get(models.User, user_id)

def get_user_by_username(db: Session, username: str) -> models.User | None:
    return db.query(models.User).filter(models.User.username == username).first()

def create_user(db: Session, user: UserCreate) -> models.User:
    db_user = models.User(**user.model_dump())
    db.add(db_user)
    db.flush()
    return db_user
