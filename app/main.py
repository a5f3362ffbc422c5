import os
from typing import Optional

from fastapi import FastAPI, Depends
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.config import config
from app.dependencies import get_rewrite_service
from app.exceptions import add_exception_handlers
from app.models import FetchRequest, FetchResponse, ErrorResponse
from app.services.rewrite_service import RewriteService

app = FastAPI(title="Fale Proxy")
add_exception_handlers(app)

@app.get("/", include_in_schema=False)
async def index():
    return FileResponse(os.path.join(config.PUBLIC_DIR, "index.html"), media_type="text/html")

@app.post(
    "/fetch",
    response_model=FetchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def fetch_url(request: Optional[FetchRequest] = None, rewrite_service: RewriteService = Depends(get_rewrite_service)):
    """
    Fetch the page at the given URL and return it with Yale replaced by Fale in its text and title.
    Runs in the threadpool since the outbound fetch blocks.
    """
    url = request.url if request is not None else None
    return rewrite_service.handle(url)

# Registered last so /fetch wins over the catch-all mount
app.mount("/", StaticFiles(directory=config.PUBLIC_DIR, html=True), name="public")


def run():
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
