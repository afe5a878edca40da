import json
import logging
import os

logger = logging.getLogger(__name__)


class SettingsManager:
    """JSON-file backed key/value settings.

    Keys missing from the file are filled from ``defaults`` and written back,
    so a first run leaves an editable ``settings.json`` next to the app.
    """

    def __init__(self, filename="settings.json", defaults=None):
        self.filename = filename
        self.defaults = dict(defaults or {})
        self.settings = {}
        self.load()

    def load(self):
        loaded = {}
        if os.path.exists(self.filename):
            try:
                with open(self.filename, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("[settings] could not read %s, resetting: %s", self.filename, e)
                loaded = {}
            if not isinstance(loaded, dict):
                logger.warning("[settings] %s does not hold an object, resetting", self.filename)
                loaded = {}
        missing = [k for k in self.defaults if k not in loaded]
        self.settings = {**self.defaults, **loaded}
        if missing or not os.path.exists(self.filename):
            self.save()

    def save(self):
        directory = os.path.dirname(self.filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.filename, "w", encoding="utf-8") as f:
            json.dump(self.settings, f, indent=4)

    def get(self, key, default=None):
        return self.settings.get(key, default)

    def set(self, key, value):
        self.settings[key] = value
        self.save()

    def as_dict(self):
        return dict(self.settings)
