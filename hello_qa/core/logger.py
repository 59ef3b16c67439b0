import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

from pythonjsonlogger import jsonlogger

from hello_qa.core.config import settings
from hello_qa.core.context import trace_id_var, client_ip_var


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        # @timestamp - UTC, 밀리초 단위
        if not log_record.get('@timestamp'):
            log_record['@timestamp'] = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        log_record['level'] = record.levelname

        # mdc 객체 안에 trace_id
        log_record['mdc'] = {"trace_id": trace_id_var.get()}

        log_record['ip'] = log_record.get('ip') or client_ip_var.get()

        # 불필요한 기본 필드 제거
        log_record.pop('timestamp', None)
        log_record.pop('color_message', None)


def get_logger(name: str):
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(settings.LOG_LEVEL.upper())

        formatter = CustomJsonFormatter(
            '%(@timestamp)s %(level)s %(mdc)s %(ip)s %(message)s'
        )

        # Handler 1: stdout → 컨테이너 로그 수집
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        # Handler 2: 파일 (LOG_FILE 설정 시에만)
        if settings.LOG_FILE:
            try:
                log_dir = os.path.dirname(settings.LOG_FILE)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                file_handler = RotatingFileHandler(
                    settings.LOG_FILE, maxBytes=10 * 1024 * 1024, backupCount=3
                )
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning("LOG_FILE_UNAVAILABLE", extra={"path": settings.LOG_FILE, "error": str(e)})

    return logger


logger = get_logger("hello-qa")

# 리스닝 주소 로그는 LOG_LEVEL과 무관하게 항상 출력 (상위 핸들러로 전파)
listener_logger = logger.getChild("listener")
listener_logger.setLevel(logging.INFO)
