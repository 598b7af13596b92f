import json
import os
import structlog
from flask import request, has_request_context

from nolej_pc.constants import TRANSLATIONS_DIR, PLUGIN_VERSION

logger = structlog.get_logger('i18n')


class I18n:
    def __init__(self, app=None, default_locale='en', translations_dir=TRANSLATIONS_DIR):
        self.translations = {}
        self.default_locale = default_locale
        self.translations_dir = translations_dir
        if app:
            self.init_app(app)

    def init_app(self, app):
        self.app = app
        self.load_translations()
        app.context_processor(self.context_processor)

    def load_translations(self):
        if not os.path.exists(self.translations_dir):
            return

        for filename in os.listdir(self.translations_dir):
            if filename.endswith('.json'):
                locale = filename[:-5]
                try:
                    with open(os.path.join(self.translations_dir, filename), 'r', encoding='utf-8') as f:
                        self.translations[locale] = json.load(f)
                except (OSError, ValueError) as e:
                    logger.error(f"Error loading translation {filename}: {e}")

    def get_locale(self):
        if not has_request_context():
            return self.default_locale

        # 1. Check for language cookie
        cookie_lang = request.cookies.get('language')
        if cookie_lang and cookie_lang in self.translations:
            return cookie_lang

        # 2. Try best match from headers
        best_match = request.accept_languages.best_match(self.translations.keys())
        return best_match or self.default_locale

    def t(self, key):
        locale = self.get_locale()
        # Fallback to default if key missing in locale
        return self.translations.get(locale, {}).get(key, self.translations.get(self.default_locale, {}).get(key, key))

    def txt(self, key, **kwargs):
        """Translate and fill the named placeholders of the text"""
        text = self.t(key)
        if kwargs:
            return text.format(**kwargs)
        return text

    def activity_label(self, activity_type):
        return self.t(f"activities_{activity_type}")

    def get_translations_dict(self):
        locale = self.get_locale()
        return self.translations.get(locale, self.translations.get(self.default_locale, {}))

    def context_processor(self):
        return dict(
            t=self.t,
            get_locale=self.get_locale,
            get_translations=self.get_translations_dict,
            plugin_version=PLUGIN_VERSION
        )
