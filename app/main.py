from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers.auth import router as auth_router
from .shared.config import get_settings


app = FastAPI(title="Auth API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_allow_origins) or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(auth_router)


@app.get("/health")
def health():
    return {"status": "ok"}
