"""Directory - 사용자 조회/등록/캐릭터 선택."""
