from __future__ import annotations
import os
from pathlib import Path
import yaml

from funclog.core.config import InstrumentSettings
from funclog.rewriting.merger import DEFAULT_INDENT, DEFAULT_PREFIX

SETTINGS_ENV = "FUNCLOG_SETTINGS"
DEFAULT_SETTINGS_PATH = Path("presets/funclog.yaml")

DEFAULT_SETTINGS = {
    "output_prefix": DEFAULT_PREFIX,
    "indent_unit": DEFAULT_INDENT,
    "line_numbers": "compensated",
}

def resolve_settings_path(settings_path: Path | None) -> Path:
    if settings_path:
        return settings_path
    env = os.environ.get(SETTINGS_ENV)
    if env:
        return Path(env)
    return DEFAULT_SETTINGS_PATH

def load_settings(settings_path: Path | None = None) -> InstrumentSettings:
    p = resolve_settings_path(settings_path)
    data = DEFAULT_SETTINGS
    if p.exists():
        try:
            loaded = yaml.safe_load(p.read_text(encoding="utf-8"))
        except Exception:
            loaded = None
        if isinstance(loaded, dict):
            data = {**DEFAULT_SETTINGS, **loaded}
    return InstrumentSettings.from_mapping(data, settings_path=p if p.exists() else None)

def save_settings(settings: InstrumentSettings, settings_path: Path | None = None) -> Path:
    p = settings_path or DEFAULT_SETTINGS_PATH
    p.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "output_prefix": settings.output_prefix,
        "indent_unit": settings.indent_unit,
        "line_numbers": settings.line_numbers,
    }
    p.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return p
