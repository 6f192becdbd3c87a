# memberfy/pipeline/render.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

log = logging.getLogger("memberfy.render")


def svg_to_png(svg: str) -> bytes:
    """Растеризация SVG -> PNG (размер берётся из width/height шаблона)."""
    # cairosvg тянет системный libcairo, поэтому импортируем лениво
    import cairosvg

    return cairosvg.svg2png(bytestring=svg.encode("utf-8"))

def load_fallback_png(path: Optional[Path]) -> Optional[bytes]:
    if not path:
        return None
    try:
        return Path(path).read_bytes()
    except OSError as e:
        log.error(f"[Fallback] cannot read fallback image {path}: {e}")
        return None
