"""SkyParty Prometheus 메트릭"""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"


def register_metrics(app: FastAPI) -> None:
    """Prometheus /metrics 엔드포인트 등록"""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


# ─────────────────────────────────────────────────────────────────────────────
# 선물 / Ledger 비즈니스 메트릭
# ─────────────────────────────────────────────────────────────────────────────

GIFT_SENT_TOTAL = Counter(
    "gift_sent_total",
    "Total number of gifts sent",
    ["item_type"],
    registry=REGISTRY,
)

GIFT_SETTLED_TOTAL = Counter(
    "gift_settled_total",
    "Total number of gifts claimed or rejected",
    ["action", "item_type"],
    registry=REGISTRY,
)

LEDGER_ADJUST_TOTAL = Counter(
    "ledger_adjust_total",
    "Total number of credit balance adjustments",
    ["operation", "result"],
    registry=REGISTRY,
)

# ─────────────────────────────────────────────────────────────────────────────
# 미니게임 / 메시지 메트릭 (game_type은 클라이언트 입력이므로 라벨로 쓰지 않음)
# ─────────────────────────────────────────────────────────────────────────────

GAME_PLAYED_TOTAL = Counter(
    "game_played_total",
    "Total number of recorded game sessions",
    registry=REGISTRY,
)

GAME_REWARD_CREDITS_TOTAL = Counter(
    "game_reward_credits_total",
    "Total credits granted by game sessions",
    registry=REGISTRY,
)

MESSAGE_SENT_TOTAL = Counter(
    "message_sent_total",
    "Total number of direct messages sent",
    registry=REGISTRY,
)
