from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


def now_ms() -> int:
    """Текущее время в миллисекундах, используется как метка версии цитаты."""
    return int(time.time() * 1000)


@dataclass
class Quote:
    text: str
    category: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Quote":
        """Builds a Quote from a `{text, category, timestamp}` mapping.

        Raises:
            ValueError: when the record does not have the expected shape.
        """

        if not isinstance(data, dict):
            raise ValueError(f"Quote record must be an object, got {type(data).__name__}")

        text = data.get("text")
        category = data.get("category")
        timestamp = data.get("timestamp")

        if not isinstance(text, str) or not text.strip():
            raise ValueError("Quote 'text' must be a non-empty string")
        if not isinstance(category, str) or not category.strip():
            raise ValueError("Quote 'category' must be a non-empty string")
        # bool is an int subclass
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("Quote 'timestamp' must be a number")

        return cls(text=text, category=category, timestamp=int(timestamp))

    @classmethod
    def create(cls, text: str, category: str, timestamp: Optional[int] = None) -> "Quote":
        return cls(
            text=text,
            category=category,
            timestamp=now_ms() if timestamp is None else timestamp,
        )
