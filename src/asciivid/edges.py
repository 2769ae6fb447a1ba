import cv2
import numpy as np


def extract_edges(
    frame: np.ndarray,
    blur_kernel: int = 7,
    low_threshold: float = 30.0,
    threshold_ratio: float = 3.0,
    aperture_size: int = 3,
) -> np.ndarray:
    """Compute a Canny edge map for a BGR frame.

    The frame is reduced to luminance and Gaussian-blurred with a
    ``blur_kernel`` x ``blur_kernel`` kernel before hysteresis thresholding
    between ``low_threshold`` and ``low_threshold * threshold_ratio``.

    Returns a uint8 array of shape (H, W) holding 0 (no edge) or 255 (edge).
    """
    if frame is None or frame.size == 0:
        raise ValueError("Cannot extract edges from an empty frame")
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected a 3-channel frame, got shape {frame.shape}")

    gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    blurred = cv2.GaussianBlur(gray, (blur_kernel, blur_kernel), 0)
    return cv2.Canny(blurred, low_threshold, low_threshold * threshold_ratio, apertureSize=aperture_size)
