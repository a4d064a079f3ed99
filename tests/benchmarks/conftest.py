"""conftest.py for benchmarks.

Provides a session-scoped seeded dataset so every benchmark in the session
queries the same records and timings are comparable.
"""

from __future__ import annotations

import random

import pytest

_STATUSES = ("DRAFT", "PENDING", "APPROVED", "REJECTED", "CANCELLED")


@pytest.fixture(scope="session")
def dataset() -> list[dict]:
    """10 000 purchase-request-like records with mixed id types and some gaps."""
    rng = random.Random(20240101)
    rows: list[dict] = []
    for i in range(10_000):
        row: dict = {
            "pr_id": i if i % 2 else str(i),
            "pr_no": f"PR-2024{rng.randint(1, 12):02d}-{i:04d}",
            "requester_name": rng.choice(["Somchai", "Malee", "Anan", "Niran", "Ploy"]),
            "status": rng.choice(_STATUSES),
            "total_amount": round(rng.uniform(0, 100_000), 2),
            "pr_date": f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
        }
        if i % 17 == 0:
            row["total_amount"] = None
        rows.append(row)
    return rows
