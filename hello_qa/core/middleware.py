import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from hello_qa.core.logger import logger
from hello_qa.core.context import bind_request_context, reset_request_context


def get_client_ip(request: Request) -> str:
    # 프록시/로드밸런서 뒤에서는 X-Forwarded-For 첫 항목이 실제 클라이언트
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client is None:
        return "-"
    return request.client.host


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get("X-Trace-Id") or str(uuid.uuid4())
        tokens = bind_request_context(trace_id, get_client_ip(request))
        try:
            start_time = time.perf_counter()
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Trace-Id"] = trace_id

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration": round(duration, 4)
            }

            if response.status_code >= 500:
                logger.error("SYSTEM_ERROR", extra=log_data)
            elif response.status_code >= 400:
                logger.warning("CLIENT_ERROR", extra=log_data)
            else:
                logger.info("REQUEST_COMPLETED", extra=log_data)

            return response
        finally:
            reset_request_context(tokens)
