# checkin_service/middleware/cors.py
from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkin_service.config import settings


def add_cors(app: FastAPI) -> None:
    origins = settings.cors_list() or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # browsers reject credentials with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )
