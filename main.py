import logging
from typing import List

from fastapi import FastAPI, Request, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from core.config import settings, setup_logging
from core.models import Hunk
from services.hunk_service import DiffTooLargeError, parse_diff_body, render_hunks
from utils.diff_parser import InvalidFormatError

# Setup logging
setup_logging()

app = FastAPI(
    title="Hunk Parser",
    version="1.0.0",
    description="Parses unified diff hunks into structured records and renders them back."
)

logger = logging.getLogger("hunk_parser")


class HunkList(BaseModel):
    hunks: List[Hunk]


async def get_raw_body(request: Request):
    return await request.body()

@app.on_event("startup")
async def startup_event():
    logger.info("Application startup...")
    logger.info(f"Log level set to: {settings.LOG_LEVEL}")


@app.get("/", tags=["General"])
async def read_root():
    """Health check endpoint."""
    return {"status": "alive"}


@app.post("/hunks", tags=["Diff"])
async def parse_hunks_endpoint(raw_body: bytes = Depends(get_raw_body)):
    """Parse a plain-text diff body into hunks."""
    try:
        diff_text = raw_body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Diff body must be UTF-8 encoded text."
        )

    try:
        hunks = await run_in_threadpool(parse_diff_body, diff_text)
    except DiffTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_CONTENT_TOO_LARGE, detail=str(e))
    except InvalidFormatError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail={"message": "Invalid format for git diff", "remaining": e.remaining}
        )

    return {"count": len(hunks), "hunks": [hunk.model_dump(mode="json") for hunk in hunks]}


@app.post("/hunks/render", tags=["Diff"], response_class=PlainTextResponse)
async def render_hunks_endpoint(payload: HunkList):
    """Render structured hunks back into diff text."""
    return render_hunks(payload.hunks)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
