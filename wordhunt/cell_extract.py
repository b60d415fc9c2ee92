import cv2
import numpy as np


def crop_board(image: np.ndarray, padding: float = 0.06) -> np.ndarray:
    """Grayscale the screenshot and trim a border of ``padding`` x the short side."""
    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if image.ndim == 3 else image
    h, w = gray.shape
    pad = int(round(min(h, w) * padding))
    if pad * 2 >= min(h, w):
        return gray
    return gray[pad:h - pad, pad:w - pad]


def split_cells(board_gray: np.ndarray, rows: int, cols: int, inset: float = 0.15) -> list[np.ndarray]:
    """Cut the board into row-major cell images, trimming ``inset`` of each cell edge."""
    h, w = board_gray.shape
    cell_h = h / rows
    cell_w = w / cols
    inset_y = int(cell_h * inset)
    inset_x = int(cell_w * inset)

    cells = []
    for r in range(rows):
        for c in range(cols):
            y1 = int(r * cell_h) + inset_y
            y2 = int((r + 1) * cell_h) - inset_y
            x1 = int(c * cell_w) + inset_x
            x2 = int((c + 1) * cell_w) - inset_x
            cells.append(board_gray[y1:y2, x1:x2])

    return cells


def preprocess_cell(cell_gray: np.ndarray, target_size: int = 64) -> np.ndarray:
    """Upscale, CLAHE and Otsu-binarize a cell so the letter is dark on light."""
    resized = cv2.resize(cell_gray, (target_size, target_size), interpolation=cv2.INTER_CUBIC)

    clahe = cv2.createCLAHE(clipLimit=2.0, tileGridSize=(4, 4))
    enhanced = clahe.apply(resized)

    _, binary = cv2.threshold(enhanced, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)

    # Mostly-dark cell means light letter on dark tile
    if np.mean(binary) < 128:
        binary = cv2.bitwise_not(binary)

    return binary
