from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orca_yield.api.routers.prices import router as prices_router
from orca_yield.api.routers.remove_liquidity_quote import router as remove_liquidity_quote_router
from orca_yield.api.routers.whirlpools import router as whirlpools_router
from orca_yield.api.routers.whirlpool_yield import router as whirlpool_yield_router
from orca_yield.shared.config import get_settings


logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Orca Yield API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(remove_liquidity_quote_router)
app.include_router(whirlpools_router)
app.include_router(prices_router)
app.include_router(whirlpool_yield_router)


@app.get("/health")
def health():
    return {"status": "ok"}
