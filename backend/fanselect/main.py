"""
FanSelect FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fanselect.api.router import router
from fanselect.config import CORS_ORIGINS

app = FastAPI(
    title="FanSelect API",
    description="Industrial fan selection, simulation and comparison engine",
    version="0.1.0",
)

# CORS: allow local frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "fan-select"}
