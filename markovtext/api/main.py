import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from markovtext.api.routes import router
from markovtext.config import settings

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        level=getattr(logging, settings.log_level.upper(), logging.WARNING))
    logger.info("markovtext API starting, order=%d", settings.order)
    yield

app = FastAPI(title="markovtext", lifespan=lifespan)
app.include_router(router)

@app.get("/")
def home():
    return {"ok": True, "app": "markovtext"}
