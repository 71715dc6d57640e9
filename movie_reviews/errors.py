"""클라이언트 예외 계층. 모두 사용자에게 보여줄 message 한 줄을 가진다."""


class ReviewClientError(Exception):
    """로더/폼 경계에서 잡아서 state.error 문자열로 바꾸는 공통 베이스"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReviewClientError):
    """네트워크 호출 전 로컬 검증 실패 (필수값 누락, 별점 범위 초과)"""


class NetworkError(ReviewClientError):
    """전송 계층 실패 (연결 거부, DNS, 타임아웃 등)"""


class ServerError(ReviewClientError):
    """2xx가 아닌 HTTP 응답"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ReviewClientError):
    """응답 본문이 JSON이 아니거나 기대한 형태가 아님 (목록 조회 경로)"""
