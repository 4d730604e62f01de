from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import io
import logging
import os
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from PIL import Image

from figures import Layer, Polygon, Shape
from plotting.vectorizer import layers_bounds, shape_to_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    stroke_color: str = "black"
    fill_color: str = "white"
    stroke_width: float = 2.0  # canvas pixels
    background: str = "white"
    dpi: int = 100


def _is_filled(shape: Shape) -> bool:
    if isinstance(shape, Polygon):
        return shape.fill
    return True


def fit_canvas(layers: Sequence[Layer], margin: float = 10.0) -> Tuple[float, float]:
    """
    Canvas size that keeps every shape visible. The canvas always starts at
    the origin, so only the far edges of the drawing matter.
    """
    bounds = layers_bounds(layers)
    if bounds is None:
        return 2 * margin, 2 * margin
    _, _, maxx, maxy = bounds
    return max(maxx, 0.0) + margin, max(maxy, 0.0) + margin


def draw_layers_on_axis(
    ax: plt.Axes,
    layers: Sequence[Layer],
    width: float,
    height: float,
    config: Optional[RenderConfig] = None,
) -> int:
    """
    Draws every shape of every layer, in order, onto ax using a y-down
    canvas of width x height. Returns the number of patches added.
    """
    config = config or RenderConfig()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.axis('off')

    # Line widths are given in canvas pixels, matplotlib wants points.
    linewidth = config.stroke_width * 72.0 / config.dpi
    count = 0
    for layer in layers:
        for shape in layer:
            for part in shape.flatten():
                patch = PathPatch(
                    shape_to_path(part),
                    facecolor=config.fill_color if _is_filled(part) else 'none',
                    edgecolor=config.stroke_color,
                    linewidth=linewidth,
                    joinstyle='round',
                )
                ax.add_patch(patch)
                count += 1
    logger.debug("drew %d patches from %d layers", count, len(layers))
    return count


def _canvas_figure(width: float, height: float, config: RenderConfig) -> Tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(figsize=(width / config.dpi, height / config.dpi), dpi=config.dpi)
    fig.patch.set_facecolor(config.background)
    # Axes cover the whole figure so that one canvas unit is one pixel.
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    return fig, ax


def save_layers_as_svg(
    layers: Sequence[Layer],
    filename: str,
    width: float,
    height: float,
    config: Optional[RenderConfig] = None,
) -> None:
    config = config or RenderConfig()
    fig, ax = _canvas_figure(width, height, config)
    draw_layers_on_axis(ax, layers, width, height, config)
    fig.savefig(filename, format='svg', facecolor=config.background)
    plt.close(fig)


def save_layers_as_png(
    layers: Sequence[Layer],
    filename: Optional[str] = None,
    width: float = 400.0,
    height: float = 400.0,
    config: Optional[RenderConfig] = None,
) -> Optional[Image.Image]:
    """
    Saves the layers as a PNG, or returns the PIL Image object if filename
    is None (in-memory rendering).
    """
    config = config or RenderConfig()
    fig, ax = _canvas_figure(width, height, config)
    draw_layers_on_axis(ax, layers, width, height, config)

    if filename is None:
        buffer = io.BytesIO()
        fig.savefig(buffer, format='png', dpi=config.dpi, facecolor=config.background)
        plt.close(fig)
        buffer.seek(0)
        return Image.open(buffer)

    fig.savefig(filename, format='png', dpi=config.dpi, facecolor=config.background)
    plt.close(fig)
    return None


def render_to_file(
    layers: Sequence[Layer],
    out_path: str,
    width: Optional[float] = None,
    height: Optional[float] = None,
    config: Optional[RenderConfig] = None,
) -> Tuple[float, float]:
    """
    Writes the layers to out_path; the format follows the extension
    (.svg or .png). Missing canvas dimensions are fitted to the drawing.
    Returns the canvas size used.
    """
    ext = os.path.splitext(out_path)[1].lower()
    if ext not in (".svg", ".png"):
        raise ValueError(f"Unsupported output format '{ext}', expected .svg or .png")

    if width is None or height is None:
        fit_w, fit_h = fit_canvas(layers)
        width = fit_w if width is None else width
        height = fit_h if height is None else height

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    if ext == ".svg":
        save_layers_as_svg(layers, out_path, width, height, config)
    else:
        save_layers_as_png(layers, out_path, width, height, config)
    logger.info("wrote %s (%gx%g)", out_path, width, height)
    return width, height
