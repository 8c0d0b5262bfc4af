from .base import BaseClient
from ..config import EGOV_API_BASE_URL, EGOV_API_V2_BASE_URL
from pathlib import Path
from typing import Any, Optional
import logging
import requests
from xml.sax.saxutils import escape

logger = logging.getLogger(__name__)

# 属性値は二重引用符で囲む
ATTR_ENTITIES = {"\"": "&quot;"}


def json_to_xml(node: Any) -> str:
    """
    v2 API の JSON ツリー（{"tag", "attr", "children"}）を XML 文字列に変換

    子要素は文字列（テキストノード）または同じ形の dict。
    """
    if isinstance(node, str):
        return escape(node)
    if not isinstance(node, dict):
        return escape(str(node))

    tag = node.get("tag", "")
    parts = [f"<{tag}"]
    for name, value in (node.get("attr") or {}).items():
        parts.append(f' {name}="{escape(str(value), ATTR_ENTITIES)}"')

    children = node.get("children") or []
    if not children:
        parts.append("/>")
    else:
        parts.append(">")
        parts.extend(json_to_xml(child) for child in children)
        parts.append(f"</{tag}>")
    return "".join(parts)


class EGovClient(BaseClient):
    def __init__(self, cache_dir: Optional[Path] = None):
        if cache_dir is None:
            super().__init__(rate_limit_sec=0.5)
        else:
            super().__init__(cache_dir=cache_dir, rate_limit_sec=0.5)
        self.base_url = EGOV_API_BASE_URL
        self.base_url_v2 = EGOV_API_V2_BASE_URL
        self.timeout_v2 = 60
        self.timeout_v1 = 180

    def fetch_law_xml(self, law_id: str) -> str:
        """
        法令XMLを取得

        1. v2 API（JSON を XML に変換）
        2. 失敗時は v1 API
        3. 両方失敗したら RuntimeError
        """
        cache_key = f"egov_law_{law_id}"
        cached = self._load_cache(cache_key)
        if cached is not None:
            return cached

        xml_content = self._fetch_law_xml_v2(law_id)

        if xml_content is None:
            logger.info(f"Falling back to v1 API for {law_id}")
            xml_content = self._fetch_law_xml_v1(law_id)

        if xml_content is None:
            raise RuntimeError(f"Failed to fetch law {law_id} from both v1 and v2 APIs")

        self._save_cache(cache_key, xml_content)
        return xml_content

    def _fetch_law_xml_v2(self, law_id: str) -> Optional[str]:
        url = f"{self.base_url_v2}/law_data/{law_id}"
        try:
            data = self.get(url, timeout=self.timeout_v2).json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"v2 API failed for {law_id}: {type(e).__name__}: {e}")
            return None

        law_full_text = data.get("law_full_text")
        if not law_full_text:
            logger.warning(f"v2 API returned no law_full_text for {law_id}")
            return None

        return f'<?xml version="1.0" encoding="UTF-8"?>\n{json_to_xml(law_full_text)}'

    def _fetch_law_xml_v1(self, law_id: str) -> Optional[str]:
        url = f"{self.base_url}/lawdata/{law_id}"
        try:
            return self.get(url, timeout=self.timeout_v1).content.decode("utf-8")
        except (requests.RequestException, UnicodeDecodeError) as e:
            logger.error(f"v1 API failed for {law_id}: {type(e).__name__}: {e}")
            return None
