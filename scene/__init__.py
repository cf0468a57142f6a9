from .config import (
    RectangleParams,
    RubberParams,
    PolygonParams,
    SceneConfig,
)
from .collection import (
    build_shapes,
    total_area,
    full_frame,
    move_and_scale,
)
from .console import (
    InputFormatError,
    parse_user_input,
    format_report,
)
