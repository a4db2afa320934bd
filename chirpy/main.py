from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from chirpy.api.v1.router import api_router
from chirpy.core.config import settings
from chirpy.core.errors import register_exception_handlers
from chirpy.core.logging import configure_logging
from chirpy.db.init_db import init_db

configure_logging(settings.LOG_LEVEL, serialize=settings.LOG_JSON)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    yield

app = FastAPI(title=settings.PROJECT_NAME, debug=settings.DEBUG, lifespan=lifespan)

allow_origins = settings.CORS_ORIGINS
allow_credentials = '*' not in allow_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=allow_credentials,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_exception_handlers(app)
app.include_router(api_router)
