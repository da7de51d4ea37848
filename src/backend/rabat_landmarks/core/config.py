# rabat_landmarks/core/config.py
import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# このconfig.pyファイルの絶対パスを取得し，.envファイルのあるリポジトリのルートをプロジェクトルートとする．
# （src/backend/rabat_landmarks/core/config.py から4つ上）
PROJECT_ROOT = Path(__file__).resolve().parents[4]
ENV_FILE_PATH = PROJECT_ROOT / '.env'

class Settings(BaseSettings):
    """
    1. Settings()の役割
        ・早期失敗：環境変数の値が不正であれば起動時に停止
        ・型の保証：型変換を一手に担うことでアプリ全体に型安全を提供
        ・バックエンドの選択：DATABASE_URLの有無で永続ストア／メモリストアを切り替える．

    2. 読み込み優先順位
        ・コード引数：Settings(DATABASE_URL=...)など
        ・システム環境変数
        ・.envファイル
        ・デフォルト値（クラス宣言内）
    """
    APP_NAME: str = "Rabat Landmarks API"

    # DATABASE_URLが未設定の場合は，POSTGRES_*が揃っていればそこから組み立てる．
    DATABASE_URL: str | None = None
    POSTGRES_USER: str | None = None
    POSTGRES_PASSWORD: str | None = None
    POSTGRES_HOST: str = 'localhost' # ローカル開発用のデフォルト値
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str | None = None

    DB_CONNECT_TIMEOUT: int = Field(default=5, gt=0) # 秒

    LOG_LEVEL: str = 'INFO'

    # フロントエンド（地図・VRビュー）の開発サーバー
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"Invalid LOG_LEVEL: {value}")
        return level

    @field_validator('DATABASE_URL')
    @classmethod
    def blank_url_is_unset(cls, value: str | None) -> str | None:
        # DATABASE_URL= のような空文字は未設定として扱う．
        if value is not None and not value.strip():
            return None
        return value

    @model_validator(mode='after')
    def compose_database_url(self) -> 'Settings':
        """
        POSTGRES_*の値からDATABASE_URLを構築する．
        """
        if self.DATABASE_URL is None and self.POSTGRES_USER and self.POSTGRES_PASSWORD and self.POSTGRES_DB:
            self.DATABASE_URL = (
                f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return self

    @computed_field
    @property
    def STORAGE_BACKEND(self) -> Literal['database', 'memory']:
        return 'database' if self.DATABASE_URL else 'memory'

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    # システム環境変数が見つからなかった場合にココを参照
    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH, # 起動時のカレントディレクトリに依存しない
        env_file_encoding='utf-8',
        extra='ignore'
    )

@lru_cache
def get_settings() -> Settings:
    """
    Settingsインスタンスを生成し，キャッシュして返す．
    これにより，アプリ全体で単一のSettingsインスタンスが保証される．
    テストではcreate_app(settings=...)で差し替える．
    """
    return Settings()
