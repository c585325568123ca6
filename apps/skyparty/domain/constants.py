"""Domain constants."""

# 단일 금액(가격, 지급/차감 수량)의 상한. PostgreSQL INTEGER 범위와 같습니다.
MAX_CREDIT_AMOUNT = 2**31 - 1
