from .records import (
    MissingHeaderError,
    NormalizeResult,
    build_header_map,
    normalize,
    normalize_with_diagnostics,
)

__all__ = [
    "MissingHeaderError",
    "NormalizeResult",
    "build_header_map",
    "normalize",
    "normalize_with_diagnostics",
]
