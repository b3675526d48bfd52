"""
Zerhacken texture generator
Writes a 512x512 red/white pixel checkerboard to zerhacken.png.

Usage: python zerhacken.py
"""

import io
import os
import tempfile

from PIL import Image
import numpy as np

# ----------------- CONFIG -----------------
WIDTH = 512
HEIGHT = 512
RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)
OUTPUT_PATH = "zerhacken.png"
# ------------------------------------------

def color_at(x, y):
    if x % 2 == 0 and y % 2 == 0:
        return RED
    return WHITE

def make_checkerboard(width=WIDTH, height=HEIGHT):
    """Build the RGBA canvas, one pixel at a time (row by row)."""
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            canvas[y, x] = color_at(x, y)
    return canvas

def encode_png(canvas):
    img = Image.fromarray(canvas)
    with io.BytesIO() as buf:
        img.save(buf, "PNG")
        return buf.getvalue()

def save_png(canvas, path=OUTPUT_PATH):
    """Encode the canvas and swap it into place, so a failed write never
       leaves a half-written PNG at path."""
    data = encode_png(canvas)
    directory = os.path.dirname(os.path.abspath(path))

    fd, tmp_path = tempfile.mkstemp(prefix=".zerhacken-", suffix=".png", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp files are 0600
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    return path

def main():
    canvas = make_checkerboard()
    path = save_png(canvas)
    print(f"Created {path} - a red and white checkerboard pattern")

if __name__ == "__main__":
    main()
