"""Small types and Enums used by assetpack."""

from enum import Enum


class AssetType(str, Enum):
    """Kinds of package the pipeline knows how to render and minify."""

    js = "js"
    css = "css"


class FetchStatus(str, Enum):
    """Outcome of fetching one path's content."""

    ok = "ok"
    empty = "empty"
    error = "error"
