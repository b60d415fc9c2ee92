import logging
from typing import Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from wordhunt.settings import settings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("wordhunt")


class SolveRequest(BaseModel):
    grid: list[list[Optional[str]]]
    min_length: Optional[int] = Field(None, ge=1)


def _results_payload(grid, results, timer, max_results: int) -> dict:
    shown = results[:max_results] if max_results > 0 else results
    return {
        "rows": len(grid),
        "cols": len(grid[0]),
        "grid": [list(row) for row in grid],
        "words": [r.to_dict() for r in shown],
        "word_count": len(shown),
        "total_found": len(results),
        "total_score": sum(r.score for r in results),
        "processing_time": timer.total_ms,
        "stage_timings": timer.summary(),
    }


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        from wordhunt.dictionary_source import load_dictionary
        from wordhunt.errors import DictionaryUnavailableError

        application.state.dictionary = None
        application.state.ocr_reader = None

        logger.info("Loading dictionary (local=%s, fallback=%s)", settings.DICTIONARY_PATH, settings.DICTIONARY_URL)
        try:
            application.state.dictionary = load_dictionary(settings)
        except DictionaryUnavailableError as e:
            logger.error("Dictionary unavailable: %s", e)

        if settings.OCR_ENABLED:
            import torch
            torch.set_num_threads(settings.TORCH_NUM_THREADS)

            from wordhunt.recognition import init_easyocr
            application.state.ocr_reader = init_easyocr()
        else:
            logger.info("OCR disabled; /solve/image unavailable")

        yield

    application = FastAPI(title="Word Hunt Solver", lifespan=lifespan)

    def _require_dictionary(request: Request):
        dictionary = request.app.state.dictionary
        if dictionary is None:
            raise HTTPException(503, "Dictionary unavailable")
        return dictionary

    @application.get("/health")
    async def health(request: Request):
        dictionary = request.app.state.dictionary
        return {
            "status": "ok",
            "dictionary_loaded": dictionary is not None,
            "dictionary_words": len(dictionary) if dictionary is not None else 0,
            "ocr_ready": request.app.state.ocr_reader is not None,
        }

    @application.post("/solve")
    async def solve(request: Request, body: SolveRequest):
        from wordhunt.board import normalize
        from wordhunt.errors import InvalidGridError
        from wordhunt.metrics import StageTimer
        from wordhunt.solver import solve as solve_board

        dictionary = _require_dictionary(request)
        min_length = body.min_length or settings.MIN_WORD_LENGTH
        timer = StageTimer()

        try:
            with timer.stage("normalize"):
                grid = normalize(body.grid)
        except InvalidGridError as e:
            raise HTTPException(400, str(e))

        with timer.stage("solve"):
            results = solve_board(grid, dictionary, min_length, settings.SOLVER_WORKERS)

        timer.count("words", len(results))
        timer.log_summary(f"Solved {len(grid)}x{len(grid[0])}")
        return JSONResponse(_results_payload(grid, results, timer, settings.MAX_RESULTS))

    @application.post("/solve/image")
    async def solve_image(
        request: Request,
        file: UploadFile = File(None),
        rows: Optional[int] = None,
        cols: Optional[int] = None,
    ):
        from wordhunt.board import normalize
        from wordhunt.metrics import StageTimer
        from wordhunt.recognition import decode_image, recognize_grid
        from wordhunt.solver import solve as solve_board

        dictionary = _require_dictionary(request)
        reader = request.app.state.ocr_reader
        if reader is None:
            raise HTTPException(503, "Image recognition unavailable")

        if file is not None and file.filename:
            logger.info("Received file: name=%s, type=%s", file.filename, file.content_type)
            if file.content_type and not file.content_type.startswith("image/"):
                raise HTTPException(400, f"Only image files accepted, got: {file.content_type}")
            data = await file.read()
        else:
            # Clients may post the image as the raw body
            data = await request.body()

        if not data:
            raise HTTPException(400, "Empty request body - no image data received")
        if len(data) > settings.MAX_UPLOAD_BYTES:
            raise HTTPException(413, f"File too large (max {settings.MAX_UPLOAD_BYTES} bytes)")

        rows = rows or settings.GRID_SIZE
        cols = cols or rows
        if rows < 1 or cols < 1:
            raise HTTPException(400, "Grid dimensions must be positive")
        timer = StageTimer()

        with timer.stage("decode"):
            image = decode_image(data)
        if image is None:
            raise HTTPException(400, "Could not decode image")

        with timer.stage("recognize"):
            raw_grid, confidences = recognize_grid(
                image, rows, cols, reader,
                settings.OCR_CONFIDENCE_THRESHOLD,
                settings.BOARD_PADDING,
                settings.CELL_INSET,
            )
        logger.info("Board %dx%d: %s", rows, cols, " / ".join(" ".join(t or "." for t in row) for row in raw_grid))

        with timer.stage("solve"):
            grid = normalize(raw_grid)
            results = solve_board(grid, dictionary, settings.MIN_WORD_LENGTH, settings.SOLVER_WORKERS)

        timer.count("words", len(results))
        timer.count("blank_tiles", sum(1 for row in raw_grid for t in row if not t))
        timer.log_summary(f"Solved image {rows}x{cols}")

        payload = _results_payload(grid, results, timer, settings.MAX_RESULTS)
        payload["cell_confidences"] = confidences
        return JSONResponse(payload)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordhunt.settings import EDITABLE_FIELDS, get_editable_settings
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordhunt.settings import get_editable_settings, update_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object")
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


def main():
    import uvicorn
    uvicorn.run("wordhunt.server:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
