"""Ledger - 크레딧 잔액과 거래 기록."""
