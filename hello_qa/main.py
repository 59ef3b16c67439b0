from fastapi import FastAPI
from hello_qa import __version__
from hello_qa.core.config import settings
from hello_qa.core.middleware import AccessLoggingMiddleware
from hello_qa.core.logger import logger
from hello_qa.routers import greeting

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    description="Deployment smoke-test server"
)

app.include_router(greeting.router)

# 요청 로깅 미들웨어
app.add_middleware(AccessLoggingMiddleware)


@app.on_event("startup")
async def startup_event():
    logger.info("SERVER_STARTED", extra={
        "project": settings.PROJECT_NAME,
        "version": __version__
    })


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("SERVER_SHUTDOWN")


if __name__ == "__main__":
    from hello_qa.server import run
    run()
