try:
    import httpx  # pyright: ignore[reportUnusedImport]

except ImportError as exc:  # pragma: no cover - covered via guard tests
    raise ImportError(
        "utils_support.web requires the 'web' extra. Install via `pip install utils-support[web]`."
    ) from exc

from utils_support.web.urls import build_url, parse_query_params

__all__ = (
    "build_url",
    "parse_query_params",
)
