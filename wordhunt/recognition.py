"""Screenshot to raw grid.

Produces a rectangular grid of best-guess lowercase letters; cells that
could not be read confidently come back blank and act as dead ends in the
solver.
"""
from __future__ import annotations

import logging

import cv2
import numpy as np

from wordhunt.cell_extract import crop_board, preprocess_cell, split_cells

logger = logging.getLogger("wordhunt")

ALLOWLIST = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Common OCR confusion mappings
CONFUSION_MAP = {
    "0": "o",
    "1": "i",
    "|": "i",
    "!": "i",
    "5": "s",
    "2": "z",
}


def decode_image(data: bytes) -> np.ndarray | None:
    arr = np.frombuffer(data, dtype=np.uint8)
    return cv2.imdecode(arr, cv2.IMREAD_COLOR)


def clean_ocr_text(text: str) -> str:
    """Reduce OCR output to a single lowercase letter, or "" if none."""
    text = text.strip().lower()
    mapped = "".join(CONFUSION_MAP.get(ch, ch) for ch in text)
    alpha = [ch for ch in mapped if "a" <= ch <= "z"]
    return alpha[0] if alpha else ""


def init_easyocr():
    """EasyOCR English reader on CPU, or None if it cannot be loaded."""
    try:
        import easyocr
    except ImportError as e:
        logger.error("EasyOCR not available: %s", e)
        return None
    reader = easyocr.Reader(["en"], gpu=False, verbose=False)
    logger.info("EasyOCR reader initialized (CPU)")
    return reader


def _read_full_board(board_gray: np.ndarray, rows: int, cols: int, reader) -> dict[tuple[int, int], tuple[str, float]]:
    """Run OCR over the whole board and bin detections into cells by box centre."""
    # Game tiles are light letters on dark cells
    inverted = cv2.bitwise_not(board_gray)
    results = reader.readtext(
        inverted,
        allowlist=ALLOWLIST,
        detail=1,
        paragraph=False,
        min_size=5,
        text_threshold=0.3,
        low_text=0.2,
    )

    h, w = board_gray.shape
    detections: dict[tuple[int, int], tuple[str, float]] = {}
    for bbox, text, conf in results:
        cx = (bbox[0][0] + bbox[2][0]) / 2
        cy = (bbox[0][1] + bbox[2][1]) / 2
        r = min(int(cy / (h / rows)), rows - 1)
        c = min(int(cx / (w / cols)), cols - 1)

        letter = clean_ocr_text(text)
        if not letter:
            continue
        if (r, c) not in detections or conf > detections[(r, c)][1]:
            detections[(r, c)] = (letter, float(conf))
    return detections


def _read_cell(cell_processed: np.ndarray, reader) -> tuple[str, float]:
    results = reader.readtext(cell_processed, allowlist=ALLOWLIST, detail=1, paragraph=False)
    best = ("", 0.0)
    for _, text, conf in results:
        letter = clean_ocr_text(text)
        if letter and conf > best[1]:
            best = (letter, float(conf))
    return best


def recognize_grid(
    image: np.ndarray,
    rows: int,
    cols: int,
    reader,
    confidence_threshold: float = 0.3,
    padding: float = 0.06,
    inset: float = 0.15,
) -> tuple[list[list[str]], list[list[float]]]:
    """Recognize a ``rows`` x ``cols`` board.

    Full-board OCR first, then single-cell OCR for cells it missed. Cells
    below ``confidence_threshold`` are left blank.
    """
    board = crop_board(image, padding)
    letters = [""] * (rows * cols)
    confidences = [0.0] * (rows * cols)

    for (r, c), (letter, conf) in _read_full_board(board, rows, cols, reader).items():
        letters[r * cols + c] = letter
        confidences[r * cols + c] = conf

    missing = [i for i, letter in enumerate(letters) if not letter]
    if missing:
        cells = split_cells(board, rows, cols, inset)
        for i in missing:
            letters[i], confidences[i] = _read_cell(preprocess_cell(cells[i]), reader)
            logger.info("Cell fallback (%d,%d): %r (conf=%.3f)", *divmod(i, cols), letters[i], confidences[i])

    for i, conf in enumerate(confidences):
        if letters[i] and conf < confidence_threshold:
            logger.info("Dropping low-confidence cell (%d,%d): %r (conf=%.3f)", *divmod(i, cols), letters[i], conf)
            letters[i] = ""

    read = sum(1 for letter in letters if letter)
    if read < rows * cols:
        logger.warning("Recognized %d/%d tiles; remaining cells are blank", read, rows * cols)

    grid = [letters[r * cols:(r + 1) * cols] for r in range(rows)]
    conf_2d = [confidences[r * cols:(r + 1) * cols] for r in range(rows)]
    return grid, conf_2d
