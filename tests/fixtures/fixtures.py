"""Shared configuration records for input source tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from ipaddress import IPv4Address
from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class ConnConfig:
    timeout: timedelta = timedelta(seconds=5)
    retries: int = 3


@dataclass(frozen=True)
class DatabaseConfig:
    host: str = "db.internal"
    conn: ConnConfig = field(default_factory=ConnConfig)


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(default="inputsource", description="application name")
    port: int = Field(default=8080, ge=0)
    ratio: float = 0.5
    debug: bool = False
    color: bool = True
    server_timeout: timedelta = timedelta(seconds=30)
    bind_address: Optional[IPv4Address] = None
    listen_address: IPv4Address = IPv4Address("127.0.0.1")
    tags: list[str] = Field(default=["alpha", "beta"])
    ports: list[int] = Field(default=[80, 443])
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()
