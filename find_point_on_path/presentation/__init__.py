"""프레젠테이션 계층 (커맨드 라인 진입점)."""
