from __future__ import annotations

from prometheus_client import Counter


OPTION_OUTCOMES_TOTAL = Counter(
    "volspec_option_outcomes_total",
    "Volume option entries by normalization outcome",
    ["key", "outcome"],
)

DECODE_TOTAL = Counter(
    "volspec_decode_total",
    "Encoded volume strings by decode result",
    ["result"],
)


def record_outcome(key: str, outcome: str) -> None:
    OPTION_OUTCOMES_TOTAL.labels(key=key, outcome=outcome).inc()


def record_decode(result: str) -> None:
    DECODE_TOTAL.labels(result=result).inc()
