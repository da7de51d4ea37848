# scripts/init_db.py

# このスクリプトを動かす前に：`docker-compose up -d db`（DATABASE_URL または POSTGRES_* を .env に設定しておく）
# 何度実行してもよい．landmarksテーブルに既にデータがあれば初期データは登録しない．

import sys
from pathlib import Path
from dotenv import load_dotenv

# backend/ をPythonの検索パスに追加（先に実行しないとrabat_landmarksが見つからないよ．）
sys.path.append(str(Path(__file__).resolve().parent.parent))

from rabat_landmarks.core.config import ENV_FILE_PATH, Settings
from rabat_landmarks.db.session import create_db_engine
from rabat_landmarks.storage import DatabaseLandmarkStore

def main(database_url: str | None = None) -> int:
    """
    テーブルを作成し，空であれば初期データを登録する．登録後の件数を返す．
    """
    # 環境変数の読み込み（プロジェクトルートの.env）
    load_dotenv(dotenv_path=ENV_FILE_PATH)

    settings = Settings(DATABASE_URL=database_url) if database_url else Settings()
    if not settings.DATABASE_URL:
        print("DATABASE_URL（または POSTGRES_*）が設定されていません．")
        return 1

    engine = create_db_engine(settings.DATABASE_URL, connect_timeout=settings.DB_CONNECT_TIMEOUT)
    try:
        print("データベースのテーブルを作成します...")
        store = DatabaseLandmarkStore(engine)
        inserted = store.initialize()
        print(f"{inserted}件の初期データを登録しました．（合計{store.count_landmarks()}件）")
    finally:
        engine.dispose()
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
