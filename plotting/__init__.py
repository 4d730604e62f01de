from .vectorizer import (
    shape_to_path,
    shape_to_shapely,
    shapely_to_path,
    layers_bounds,
)
from .renderer import (
    RenderConfig,
    fit_canvas,
    draw_layers_on_axis,
    save_layers_as_svg,
    save_layers_as_png,
    render_to_file,
)
