from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
CACHE_DIR = PROJECT_ROOT / "cache"

# e-Gov API
EGOV_API_BASE_URL = "https://laws.e-gov.go.jp/api/1"
EGOV_API_V2_BASE_URL = "https://laws.e-gov.go.jp/api/2"

# User Agent
USER_AGENT = "LawAbbrev/0.1.0"

# Work directory layout
DEFAULT_INDEX_FILE = "index.json"

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
