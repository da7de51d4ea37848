# rabat_landmarks/models/user.py
from sqlalchemy import Column, Integer, String
from rabat_landmarks.db.base_class import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
