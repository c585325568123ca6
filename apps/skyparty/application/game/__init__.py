"""Game - 미니게임 보상 지급 및 플레이 기록."""
