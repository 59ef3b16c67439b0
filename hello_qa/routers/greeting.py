from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "hello world qa"
HEALTH_MESSAGE = "health check. Add this for checking response change with imagePullPolicy:Always active"


@router.get("/", response_class=PlainTextResponse)
def root():
    return GREETING


@router.get("/health", response_class=PlainTextResponse)
def health_check():
    # 이미지 교체(imagePullPolicy: Always) 확인용 응답
    return HEALTH_MESSAGE
