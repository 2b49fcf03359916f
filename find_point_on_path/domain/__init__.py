"""경로 도메인 계층 (값 객체, 열거형, 예외)."""
