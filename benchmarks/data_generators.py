"""
Document generators for parsing benchmarks.

Produces the shapes jtree callers typically feed it:
- service configuration files
- JSON log streams wrapped in an array
- tabular rows exported from CSV sources
- deeply nested trees
- escape-heavy text
"""

import json
import random
import string
from collections.abc import Callable
from typing import Any

DATA_TYPES = (
    "config",
    "log_batch",
    "table_rows",
    "nested_structure",
    "string_heavy",
)

_ESCAPES = ('\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t")
_ESCAPE_PROBABILITY = 0.3
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def generate_test_data(data_type: str, seed: int = 0) -> str:
    """Generates a JSON document of the given shape, reproducibly."""
    generators: dict[str, Callable[[random.Random], Any]] = {
        "config": _config,
        "log_batch": _log_batch,
        "table_rows": _table_rows,
        "nested_structure": _nested_structure,
    }
    rng = random.Random(seed)
    if data_type == "string_heavy":
        return _string_heavy(rng)
    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return json.dumps(generators[data_type](rng))


def _config(rng: random.Random) -> dict[str, Any]:
    """A service configuration with nested settings (< 2KB)."""
    return {
        "name": "ingest-service",
        "version": f"{rng.randint(1, 3)}.{rng.randint(0, 9)}.{rng.randint(0, 9)}",
        "enabled": True,
        "settings": {
            "timeout": rng.randint(5, 60),
            "retries": rng.randint(0, 5),
            "backoff": round(rng.uniform(0.1, 2.0), 3),
            "endpoints": [
                f"https://{_word(rng, 8)}.example.com/api" for _ in range(5)
            ],
            "limits": {"rps": 250, "burst": 50, "queue": None},
        },
    }


def _log_batch(rng: random.Random) -> list[dict[str, Any]]:
    """Structured log records, one object per line in the source stream."""
    return [
        {
            "ts": 1_700_000_000 + i * rng.randint(1, 30),
            "level": rng.choice(_LEVELS),
            "logger": f"app.{_word(rng, 6)}",
            "message": f"request {_word(rng, 12)} handled",
            "latency_ms": round(rng.uniform(0.5, 900.0), 2),
            "ok": rng.random() > 0.1,
        }
        for i in range(300)
    ]


def _table_rows(rng: random.Random) -> dict[str, Any]:
    """A table exported from CSV: header list plus positional rows."""
    header = ["id", "city", "temperature_c", "humidity", "flagged"]
    rows = [
        [
            i,
            _word(rng, 10),
            round(rng.uniform(-30.0, 45.0), 1),
            rng.randint(0, 100),
            rng.choice([True, False, None]),
        ]
        for i in range(500)
    ]
    return {"header": header, "rows": rows}


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    """A tree eight levels deep with fan-out at every level."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _word(rng, 10)}
        return {
            "level": depth,
            "data": _word(rng, 15),
            "items": [node(depth - 1) for _ in range(3)],
            "nested": node(depth - 1),
        }

    return node(8)


def _string_heavy(rng: random.Random) -> str:
    """Strings dense with escape sequences, written as raw JSON text."""

    def escaped() -> str:
        return "".join(
            rng.choice(_ESCAPES)
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + string.digits + " ")
            for _ in range(50)
        )

    strings = ", ".join(f'"{escaped()}"' for _ in range(200))
    paths = ", ".join(
        f'"file_{i}": "C:\\\\Users\\\\{_word(rng, 8)}\\\\doc_{i}.txt"'
        for i in range(40)
    )
    return f'{{"strings": [{strings}], "paths": {{{paths}}}}}'


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
