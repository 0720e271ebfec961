from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import impermanent_loss, presets, simulate_portfolio, simulate_scenario
from app.shared.config import get_settings

app = FastAPI(title="LP Scenario API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(simulate_scenario.router)
app.include_router(simulate_portfolio.router)
app.include_router(impermanent_loss.router)
app.include_router(presets.router)
