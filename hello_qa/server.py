import socket
from typing import List, Optional

import uvicorn

from hello_qa.core.config import settings
from hello_qa.core.logger import listener_logger


def log_listening(host: str, port: int) -> None:
    listener_logger.info(
        "Example app listening at 'http://%s:%s'", host, port,
        extra={"host": host, "port": port},
    )


class ListeningServer(uvicorn.Server):
    """바인딩이 끝난 뒤 실제 주소를 로그로 남기는 uvicorn 서버.

    바인딩 실패 시 uvicorn이 에러 로그를 남기고 0이 아닌 코드로 종료한다.
    """

    async def startup(self, sockets: Optional[List[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        for server in self.servers:
            for sock in server.sockets:
                host, port = sock.getsockname()[:2]
                log_listening(host, port)


def build_config(host: Optional[str] = None, port: Optional[int] = None) -> uvicorn.Config:
    return uvicorn.Config(
        "hello_qa.main:app",
        host=settings.HOST if host is None else host,
        port=settings.PORT if port is None else port,
        log_level=settings.LOG_LEVEL.lower(),
    )


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    # SIGINT/SIGTERM: uvicorn이 리스너를 닫은 뒤 같은 시그널을 다시 발생시켜 종료
    ListeningServer(build_config(host, port)).run()
