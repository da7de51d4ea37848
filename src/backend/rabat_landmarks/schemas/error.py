# rabat_landmarks/schemas/error.py
from pydantic import BaseModel

# エラー時のレスポンス．例：{"message": "Landmark not found"}
class ErrorMessage(BaseModel):
    message: str
