"""Stats DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServiceStats:
    """운영 통계.

    Attributes:
        total_users: 전체 사용자 수
        active_users: 최근 활동 기간(기본 7일) 안에 로그인한 사용자 수
        activated_users: 활성화된 사용자 수
        total_transactions: 크레딧 거래 기록 수
        pending_gifts: 처리 대기 선물 수
        total_credits_in_circulation: 전체 사용자 잔액 합계
        total_game_sessions: 미니게임 플레이 기록 수
    """

    total_users: int
    active_users: int
    activated_users: int
    total_transactions: int
    pending_gifts: int
    total_credits_in_circulation: int
    total_game_sessions: int
