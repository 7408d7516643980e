"""Module holding constants used across assetpack."""

DEFAULT_MANIFEST = "assetpack.json"
DEFAULT_OUTPUT_DIR = "public"
DEFAULT_IGNORE = (".*", "_*")
BUSTER_SEGMENT = r"(?:\.[a-f0-9]{32})?"
USER_AGENT = "assetpack/0.1"
HTTP_TIMEOUT_SEC = 30
