import logging

import pytest
from fastapi.testclient import TestClient

from hello_qa.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service_caplog(caplog):
    # 서비스 로거("hello-qa")의 레코드를 root 로 전파받아 수집
    caplog.set_level(logging.INFO, logger="hello-qa")
    return caplog


@pytest.fixture
def anyio_backend():
    return "asyncio"
