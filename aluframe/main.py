from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .exceptions import register_exception_handlers
from .routers import estimate, shapes

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("aluframe")

app = FastAPI(
    title=settings.APP_NAME,
    description="Aluminium window and door frame cutting list and price estimator",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# API routes
app.include_router(shapes.router, prefix="/api")
app.include_router(estimate.router, prefix="/api")

logger.info("%s ready", settings.APP_NAME)


@app.get("/health")
def health():
    return {"status": "ok", "app": "aluframe"}
