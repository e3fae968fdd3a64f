from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from content_guard.config import CORS_ORIGINS
from content_guard.logger import logger
from content_guard.routers.plagiarism import router as plagiarism_router

app = FastAPI(title="content-guard")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plagiarism_router)


@app.get("/health")
def health():
    return {"status": "ok"}


logger.info("content-guard API ready")
