# rabat_landmarks/storage/__init__.py
from .base import LandmarkStore
from .database import DatabaseLandmarkStore
from .factory import create_store, get_store
from .memory import MemoryLandmarkStore
