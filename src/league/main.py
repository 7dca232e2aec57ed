import logging

from fastapi import FastAPI

from league.config import LOG_LEVEL
from league.router import router as league_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="League Fixtures")
app.include_router(league_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
