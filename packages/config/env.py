# config environment
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel
from packages.config.constants import (
    DEFAULT_BASE_URL, DEFAULT_USER_AGENT, DEFAULT_REFERER, DEFAULT_UNIT, ADDRESS_FILE,
)

class Cfg(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    bypass_token: Optional[str] = None
    validator_address: Optional[str] = None
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    referer: str = DEFAULT_REFERER
    unit: str = DEFAULT_UNIT
    epoch_span: int = 100
    endpoints_file: Optional[str] = None
    log_level: str = "warning"

def load_cfg(env_file: Optional[str] = None) -> Cfg:
    if env_file:
        load_dotenv(env_file)
    return Cfg(
        base_url=os.environ.get("DASHTEC_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        bypass_token=os.environ.get("DASHTEC_BYPASS_TOKEN") or None,
        validator_address=os.environ.get("VALIDATOR_ADDRESS") or None,
        timeout=float(os.environ.get("HTTP_TIMEOUT", "30")),
        user_agent=os.environ.get("USER_AGENT", DEFAULT_USER_AGENT),
        referer=os.environ.get("REFERER", DEFAULT_REFERER),
        unit=os.environ.get("TOKEN_UNIT", DEFAULT_UNIT),
        epoch_span=int(os.environ.get("EPOCH_SPAN", "100")),
        endpoints_file=os.environ.get("ENDPOINTS_FILE") or None,
        log_level=os.environ.get("LOG_LEVEL", "warning"),
    )

def update_env_file(path: str, key: str, value: str) -> None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except FileNotFoundError:
        lines = []
    out, seen = [], False
    for line in lines:
        if line.startswith(f"{key}="):
            out.append(f"{key}={value}\n")
            seen = True
        else:
            out.append(line)
    if not seen:
        out.append(f"{key}={value}\n")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.writelines(out)

def read_saved_address(path: Optional[str] = None) -> Optional[str]:
    p = Path(path or ADDRESS_FILE).expanduser()
    try:
        saved = p.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return None
    return saved or None

def save_address(address: str, path: Optional[str] = None) -> None:
    p = Path(path or ADDRESS_FILE).expanduser()
    p.write_text(address + "\n", encoding="utf-8")
