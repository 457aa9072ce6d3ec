"""
PatrolLink Backend — FastAPI application.
REST + WebSocket API turning operator utterances into robot instruction tokens.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router as api_router
from .api.websocket import router as ws_router
from .config import CORS_ORIGINS

app = FastAPI(
    title="PatrolLink API",
    description="English/Urdu command compiler for remote patrol robots",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")
app.include_router(ws_router)


@app.get("/")
async def root():
    return {"name": "PatrolLink", "status": "running"}


@app.get("/health")
async def health():
    return {"status": "ok"}
