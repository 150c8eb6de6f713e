import os, json
import logging
from threading import Lock
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_PATH = os.path.join(os.path.dirname(__file__), "data", "preferences.json")


class PreferenceStore:
    """
    Armazenamento chave-valor durável (equivalente ao localStorage do navegador).
    Valores são sempre strings; o arquivo é um único objeto JSON.
    """

    def __init__(self, path: str = None):
        # PREFERENCES_PATH vazio no .env conta como não definido
        self.path = path or os.getenv("PREFERENCES_PATH") or DEFAULT_PREFERENCES_PATH
        self._lock = Lock()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, ValueError):
            logger.warning("%s está vazio ou corrompido. Recriando do zero.", self.path)
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def _save(self, data: Dict[str, str]):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str):
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)
