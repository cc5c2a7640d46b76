# profitscope/core/errors.py
# -----------------------------------------------------------------------------
# 도메인 예외
# - ValidationError     : 시나리오 이름 누락 등 입력 오류 (422)
# - NotFoundError       : 존재하지 않는 id (404)
# - TransientStoreError : 저장소(DB) 장애 (503), 자동 재시도 없음
# -----------------------------------------------------------------------------


class ProfitscopeError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProfitscopeError):
    status_code = 422


class NotFoundError(ProfitscopeError):
    status_code = 404


class TransientStoreError(ProfitscopeError):
    status_code = 503
