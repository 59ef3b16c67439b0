from contextvars import ContextVar, Token
from typing import Tuple

# 로그 보강용 요청 컨텍스트 (요청 밖에서는 "-")
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="-")
client_ip_var: ContextVar[str] = ContextVar("client_ip", default="-")

RequestContextTokens = Tuple[Token, Token]


def bind_request_context(trace_id: str, client_ip: str) -> RequestContextTokens:
    return trace_id_var.set(trace_id), client_ip_var.set(client_ip)


def reset_request_context(tokens: RequestContextTokens) -> None:
    trace_token, ip_token = tokens
    trace_id_var.reset(trace_token)
    client_ip_var.reset(ip_token)
