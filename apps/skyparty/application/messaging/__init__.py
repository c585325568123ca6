"""Messaging - 사용자 간 1:1 메시지."""
