import hashlib
import time
import requests
from pathlib import Path
from typing import Optional, Dict
import logging
from ..config import CACHE_DIR, USER_AGENT

logger = logging.getLogger(__name__)


class BaseClient:
    """レート制限とファイルキャッシュ付きの HTTP クライアント（テキスト応答用）"""

    def __init__(self, cache_dir: Path = CACHE_DIR, rate_limit_sec: float = 1.0):
        self.cache_dir = cache_dir
        self.rate_limit_sec = rate_limit_sec
        self.last_request_time = 0.0
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _get_cache_path(self, key: str) -> Path:
        hashed = hashlib.md5(key.encode("utf-8")).hexdigest()
        return self.cache_dir / f"{hashed}.xml"

    def _load_cache(self, key: str) -> Optional[str]:
        cache_path = self._get_cache_path(key)
        if cache_path.exists():
            logger.debug(f"Cache hit: {key}")
            return cache_path.read_text(encoding="utf-8")
        return None

    def _save_cache(self, key: str, text: str):
        self._get_cache_path(key).write_text(text, encoding="utf-8")

    def _wait_rate_limit(self):
        elapsed = time.time() - self.last_request_time
        if elapsed < self.rate_limit_sec:
            time.sleep(self.rate_limit_sec - elapsed)

    def get(self, url: str, params: Optional[Dict] = None, timeout: float = 60) -> requests.Response:
        self._wait_rate_limit()
        logger.info(f"Fetching: {url}")
        try:
            resp = self.session.get(url, params=params, timeout=timeout)
            resp.raise_for_status()
            return resp
        finally:
            self.last_request_time = time.time()
