from .tabular import ParseResult, parse, parse_with_diagnostics

__all__ = [
    "ParseResult",
    "parse",
    "parse_with_diagnostics",
]
