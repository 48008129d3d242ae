"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathwise.api.routes import investments, loans, portfolio, visualization
from pathwise.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Pathwise",
    description="Loan amortization and investment growth projections",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(loans.router)
app.include_router(investments.router)
app.include_router(visualization.router)
app.include_router(portfolio.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
