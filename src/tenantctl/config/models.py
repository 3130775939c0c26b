"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tenantctl.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

MEMORY_STORE = ":memory:"


class StoreConfig(BaseModel):
    """[store] section.

    ``path`` is relative to the directory holding ``tenantctl.toml``;
    ``":memory:"`` keeps everything in process memory.
    """

    model_config = {"frozen": True}

    path: str = ".tenantctl/store.json"


class LogConfig(BaseModel):
    """[log] section."""

    model_config = {"frozen": True}

    format: Literal["console", "json"] = "console"

