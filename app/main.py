from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.api import routers
import logging
import traceback
import uvicorn
from app.core.config import settings
from app.core.error_handlers import register_exception_handlers
from app.db.session import connect_db_engine, init_db, close_db_engine

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup failures abort the process; request failures only get logged
    try:
        await connect_db_engine()
        await init_db()
    except Exception as e:
        logging.critical(f"Server failed to start: {e}\n{traceback.format_exc()}")
        await close_db_engine()
        raise
    logging.info(f"✅ {settings.APP_NAME} server started ({settings.ENVIRONMENT}, v{settings.APP_VERSION})")
    yield
    await close_db_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title="VastraDaan API",
        description="Clothing donation pickups: registration, login and donation history",
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    register_exception_handlers(app)
    app.include_router(routers.router)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.APP_NAME} API 🧵"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
