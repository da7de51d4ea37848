# rabat_landmarks/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rabat_landmarks.core.config import Settings, get_settings
from rabat_landmarks.core.logging import setup_logging
from rabat_landmarks.routers import landmarks
from rabat_landmarks.storage import DatabaseLandmarkStore, LandmarkStore, create_store

logger = logging.getLogger(__name__)

def create_app(settings: Settings | None = None, store: LandmarkStore | None = None) -> FastAPI:
    """
    アプリを組み立てる．storeを渡さなければ，起動時（lifespan）に設定からストアを作成する．
    ストアの初期化（初期データの登録）はリクエストを受け付ける前に完了する．
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level_value)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = create_store(settings)
        logger.info("Starting %s (backend=%s)", settings.APP_NAME, app.state.store.backend_name)
        yield
        # 自分で作ったストアの接続プールだけを閉じる．
        if owns_store and isinstance(app.state.store, DatabaseLandmarkStore):
            app.state.store.engine.dispose()
        logger.info("Shutting down...")

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # エラーレスポンスは全て {"message": ...} の形に揃える．
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        # 内部のエラー内容（DBドライバのメッセージなど）はクライアントに返さない．
        logger.error("Unhandled exception: %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    app.include_router(landmarks.router)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.APP_NAME}!"}

    @app.get("/health")
    def health_check(request: Request):
        store: LandmarkStore = request.app.state.store
        return {"status": "ok", "backend": store.backend_name, "landmarks": store.count_landmarks()}

    return app

# import時にはアプリを組み立てない（設定の読み込みとログ設定は起動時に行う）．
# uvicorn --factory rabat_landmarks.main:create_app
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("rabat_landmarks.main:create_app", factory=True, host="0.0.0.0", port=8000)
