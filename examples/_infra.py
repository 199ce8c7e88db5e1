from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


def sample_gradebook() -> dict[str, object]:
    return {
        "student": {"name": "Alice", "email": "alice@example.com"},
        "settings": {"theme": "dark", "rounding": 1},
        "assignments": [
            {"name": "Essay", "score": 88, "max_score": 100, "weight": 0.3},
            {"name": "Quiz 1", "score": 17, "max_score": 20, "weight": 0.2},
        ],
    }


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
