# shared_lib/i18n.py
import json
import logging
from pathlib import Path

from shared_lib.config import DEFAULT_LANG

LOCALES_DIR = Path(__file__).parent / "locales"

logger = logging.getLogger(__name__)


class Translator:
    """Looks up user-facing strings in the JSON catalogs under `locales/`."""
    def __init__(self, locales_dir: Path = LOCALES_DIR, default_lang: str = DEFAULT_LANG):
        self.default_lang = default_lang
        self.translations: dict[str, dict[str, str]] = {}
        for path in sorted(locales_dir.glob("*.json")):
            with open(path, 'r', encoding='utf-8') as f:
                self.translations[path.stem] = json.load(f)
        if default_lang not in self.translations:
            logger.warning(f"No catalog found for default language '{default_lang}' in {locales_dir}")

    def gettext(self, lang: str, key: str, **kwargs) -> str:
        text = self.translations.get(lang, {}).get(key)
        if text is None:
            text = self.translations.get(self.default_lang, {}).get(key, key)
        return text.format(**kwargs) if kwargs else text


translator = Translator()
