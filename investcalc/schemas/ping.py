"""Pydantic schemas for the health-check and catalog endpoints."""

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str


class StrategyInfo(BaseModel):
    key: str
    name: str
