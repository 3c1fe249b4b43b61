from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    id: str
    name: str = ""
    version: str = "1.0.0"
    language: str = "english"  # selects the stop-word resource
