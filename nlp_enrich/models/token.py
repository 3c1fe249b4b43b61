from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Token:
    """
    A parsed token. `text`, `index` and the char span identify the token and are
    never touched by enrichers; `is_stop_word` is the stop-word annotation.
    """

    text: Optional[str]
    index: int = 0
    start_char: int = 0
    end_char: int = 0
    is_stop_word: bool = False
