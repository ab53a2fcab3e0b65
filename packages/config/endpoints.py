import yaml
from typing import Optional, Dict
from packages.config.constants import DEFAULT_ENDPOINTS

def load_endpoints(path: Optional[str] = None) -> Dict[str, str]:
    """Endpoint table, with per-kind overrides read from a YAML mapping.

    The file may hold the mapping at top level or under an ``endpoints`` key.
    Unknown kinds are rejected so a typo does not silently fall back.
    """
    table = dict(DEFAULT_ENDPOINTS)
    if not path:
        return table
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of endpoint kind to path")
    overrides = data.get("endpoints", data)
    for kind, tmpl in overrides.items():
        if kind not in DEFAULT_ENDPOINTS:
            raise ValueError(f"{path}: unknown endpoint kind {kind!r}")
        table[kind] = str(tmpl)
    return table
