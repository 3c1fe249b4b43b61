from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4


@dataclass(frozen=True)
class Request:
    text: str
    request_id: str = field(default_factory=lambda: uuid4().hex)
    user_id: Optional[str] = None
