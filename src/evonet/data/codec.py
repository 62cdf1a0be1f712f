"""
Pixel Codec Module

This module converts RGBA pixel buffers to flat input vectors and back.

Pixel buffers are numpy uint8 arrays of shape (height, width, 4). Vectors are
float64, row-major and channel-interleaved:
    [R(0,0), G(0,0), B(0,0), A(0,0), R(1,0), G(1,0), ...]
with every channel divided by 256, so that each value lies in [0, 1).

Decoding only knows the vector length, so it picks the image dimensions
closest to a square whose pixel count matches (see 'image_dimensions').
Non-square images therefore do not decode back to their original shape.
"""

import math
import numpy as np

CHANNEL_COUNT = 4   # R, G, B, A

def pixels_to_vector(pixels) -> np.ndarray:
    """
    Flatten an RGBA pixel buffer into an input vector.

    Parameters:
        pixels: uint8 array of shape (height, width, 4)

    Returns:
        float64 vector of length height*width*4, values in [0, 1)
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != CHANNEL_COUNT:
        raise ValueError(f"Expected a (height, width, {CHANNEL_COUNT}) pixel buffer, got shape {pixels.shape}")

    return pixels.reshape(-1).astype(np.float64) / 256.0

def buffer_to_pixels(width: int, height: int, data: bytes) -> np.ndarray:
    """
    Wrap raw RGBA8 bytes (row-major) into a (height, width, 4) pixel buffer.
    """
    expected = width * height * CHANNEL_COUNT
    if len(data) != expected:
        raise ValueError(f"Expected {expected} bytes for a {width}x{height} RGBA buffer, got {len(data)}")

    return np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNEL_COUNT).copy()

def image_dimensions(pixel_count: int) -> tuple[int, int]:
    """
    Find the (width, height) pair closest to a square with width*height == pixel_count.

    Starts from floor(sqrt(n)) x ceil(sqrt(n)) and shrinks the height while the
    area is too large, or grows the width while it is too small. The height
    only decreases and the width only increases, so the search ends at the
    latest on (n, 1).
    """
    if pixel_count <= 0:
        raise ValueError(f"Pixel count must be positive, got {pixel_count}")

    root = math.sqrt(pixel_count)
    width, height = math.floor(root), math.ceil(root)

    while width * height != pixel_count:
        if width * height > pixel_count:
            height -= 1
        else:
            width += 1

    return width, height

def vector_to_pixels(vector) -> np.ndarray:
    """
    Rebuild an RGBA pixel buffer from an input vector.

    Values are scaled by 255 and truncated, so a channel encoded as c/256
    decodes to c-1 or c.

    Parameters:
        vector: float vector whose length is a positive multiple of 4

    Returns:
        uint8 array of shape (height, width, 4)
    """
    vector = np.asarray(vector, dtype=np.float64)
    if vector.ndim != 1 or len(vector) == 0 or len(vector) % CHANNEL_COUNT != 0:
        raise ValueError(f"Vector length must be a positive multiple of {CHANNEL_COUNT}, got shape {vector.shape}")

    width, height = image_dimensions(len(vector) // CHANNEL_COUNT)

    # pixel (x, y) starts at index (x + y*width) * 4, which is exactly a row-major reshape
    # out-of-range values saturate instead of wrapping around
    channels = np.clip(vector * 255.0, 0.0, 255.0).astype(np.uint8)
    return channels.reshape(height, width, CHANNEL_COUNT)
