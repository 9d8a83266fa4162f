"""Render API server"""

import logging
from typing import Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import Response

from opendocx.config import Settings
from opendocx.converter.json_loader import JsonDocumentLoader
from opendocx.core import OpenDocx
from opendocx.wordml.errors import OpenDocxError

logger = logging.getLogger(__name__)

settings = Settings.from_env()

app = FastAPI(
    title="opendocx API",
    description="Render JSON document descriptions to WordprocessingML",
    version="0.1.0",
)

XML_MEDIA_TYPE = "application/xml"


def _load(data: dict):
    try:
        return JsonDocumentLoader(settings.media_root, confine=True).load(data)
    except OpenDocxError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/v1/render")
async def render_document(data: dict = Body(...), pretty: Optional[bool] = None) -> Response:
    """
    Render a document description to document.xml

    - **body**: blocks (paragraph, table, image); image sources are
      relative to the media root
    - **styles**: style definitions (not included in the response)
    - **section**: page size and margins
    """
    document = _load(data)
    renderer = OpenDocx(pretty_print=settings.pretty_print if pretty is None else pretty)

    try:
        xml = renderer.render(document)
    except (OpenDocxError, ValueError) as e:
        logger.info("Render rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return Response(
        content=xml,
        media_type=XML_MEDIA_TYPE,
        headers={"X-Media-Count": str(len(renderer.media))},
    )


@app.post("/v1/styles")
async def render_styles(data: dict = Body(...), pretty: Optional[bool] = None) -> Response:
    """Render the description's styles to styles.xml"""
    document = _load(data)
    renderer = OpenDocx(pretty_print=settings.pretty_print if pretty is None else pretty)

    try:
        xml = renderer.render_styles(document)
    except (OpenDocxError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return Response(content=xml, media_type=XML_MEDIA_TYPE)


@app.get("/health")
async def health_check() -> dict:
    """Health check"""
    return {"status": "ok"}


def run():
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
