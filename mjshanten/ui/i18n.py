"""Internationalization support for the shanten analyzer.

Usage:
    from mjshanten.ui.i18n import t, set_language, translate_shape

    set_language("en")                # Switch to English
    t("label.shanten", n=1)           # -> "1-shanten"
    translate_shape("seven_pairs")    # -> "Seven Pairs"
"""


class I18n:
    """Singleton internationalization manager."""

    _lang: str = "zh"
    _translations: dict = {}
    _loaded: bool = False

    @classmethod
    def set_language(cls, lang: str):
        """Set the active language."""
        cls._lang = lang
        cls._load_translations()

    @classmethod
    def _load_translations(cls):
        """Load translations for the current language."""
        if cls._lang == "ja":
            from mjshanten.ui.locales.ja import TRANSLATIONS
        elif cls._lang == "en":
            from mjshanten.ui.locales.en import TRANSLATIONS
        else:
            from mjshanten.ui.locales.zh import TRANSLATIONS
        cls._translations = TRANSLATIONS
        cls._loaded = True

    @classmethod
    def get(cls, key: str, **kwargs) -> str:
        """Get a translated string by key, with optional format arguments."""
        if not cls._loaded:
            cls._load_translations()
        text = cls._translations.get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text

    @classmethod
    def get_language(cls) -> str:
        """Get the current language code."""
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Global translation function."""
    return I18n.get(key, **kwargs)


def set_language(lang: str):
    """Set the active language."""
    I18n.set_language(lang)


def get_language() -> str:
    """Get the current language code."""
    return I18n.get_language()


def translate_shape(shape_value: str) -> str:
    """Translate a ShapeTag value to the current language."""
    return I18n.get(f"shape.{shape_value}")


def shanten_label(shanten: int) -> str:
    """Localized label: agari for -1, tenpai for 0, n-shanten otherwise."""
    if shanten == -1:
        return t("label.agari")
    if shanten == 0:
        return t("label.tenpai")
    return t("label.shanten", n=shanten)
