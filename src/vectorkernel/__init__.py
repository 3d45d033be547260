import logging
import os
from logging.handlers import RotatingFileHandler

logger = logging.getLogger("vectorkernel")
logger.addHandler(logging.NullHandler())

log_file_env:str|None = os.environ.get("VECTORKERNEL_LOG_FILE", None)
if log_file_env:
    file_handler = RotatingFileHandler(log_file_env, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)

log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
if log_level_env:
    levels_by_name = logging.getLevelNamesMapping()
    level = levels_by_name[log_level_env.upper()]

    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler()

    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)

else:
    logger.setLevel(logging.WARN)


from vectorkernel.numeric import EPS, FLOAT32, FLOAT64, INT32, NumericKind  # noqa: E402
from vectorkernel.vecmath import clamp01, smooth_step  # noqa: E402
from vectorkernel.vec2i import Vec2I  # noqa: E402
from vectorkernel.vec2f import Vec2F  # noqa: E402
from vectorkernel.vec2d import Vec2D  # noqa: E402
from vectorkernel.frozen import FrozenVec2  # noqa: E402
from vectorkernel import convert, batch  # noqa: E402
from vectorkernel.batch import (  # noqa: E402
    average_vectors,
    lerp_all,
    normalize_all,
    scale_all,
    sum_vectors,
)

__all__ = [
    "EPS",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "NumericKind",
    "Vec2I",
    "Vec2F",
    "Vec2D",
    "FrozenVec2",
    "convert",
    "batch",
    "average_vectors",
    "lerp_all",
    "normalize_all",
    "scale_all",
    "sum_vectors",
    "clamp01",
    "smooth_step",
    "logger",
]
