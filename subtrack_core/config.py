# subtrack_core/config.py
# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .subtitles.presentation import PLATFORM_FONT_SCALE

logger = logging.getLogger(__name__)


class AppConfig:
    def __init__(self, settings_path: Optional[Path] = None, settings_filename: str = 'subtrack_settings.json'):
        if settings_path is None:
            settings_path = Path(__file__).resolve().parent.parent / settings_filename
        self.settings_path = Path(settings_path)
        self.defaults: Dict[str, Any] = {
            # --- Presentation ---
            'platform': 'default',
            'platform_font_scale': dict(PLATFORM_FONT_SCALE),  # viewport-height multiplier per platform
            'reference_width': 1280,
            'reference_height': 720,

            # --- Track ---
            'end_inclusive': True,  # event still shown at its exact end time
            'source_encoding': '',  # empty = auto-detect

            # --- Logging ---
            'log_level': 'INFO',
            'log_timestamps': True,
        }
        self.settings = self._copy_defaults()
        self.load()

    def _copy_defaults(self) -> Dict[str, Any]:
        settings = self.defaults.copy()
        settings['platform_font_scale'] = dict(self.defaults['platform_font_scale'])
        return settings

    def load(self):
        changed = False
        if self.settings_path.exists():
            try:
                with open(self.settings_path, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if not isinstance(loaded_settings, dict):
                    raise ValueError('settings file must hold a JSON object')

                for key, default_value in self.defaults.items():
                    if key not in loaded_settings:
                        loaded_settings[key] = default_value
                        changed = True

                scale = loaded_settings.get('platform_font_scale')
                if not isinstance(scale, dict):
                    loaded_settings['platform_font_scale'] = dict(PLATFORM_FONT_SCALE)
                    changed = True
                self.settings = loaded_settings
            except (json.JSONDecodeError, ValueError, OSError) as e:
                logger.warning("Invalid settings file %s, using defaults: %s", self.settings_path, e)
                self.settings = self._copy_defaults()
                changed = True
        else:
            self.settings = self._copy_defaults()
            changed = True

        if changed:
            self.save()

    def save(self):
        try:
            keys_to_save = self.defaults.keys()
            settings_to_save = {k: self.settings.get(k) for k in keys_to_save if k in self.settings}
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(settings_to_save, f, indent=4)
        except OSError as e:
            logger.error("Error saving settings: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        self.settings[key] = value
