from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]  # project root, above src/
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return v.lower() not in ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    db_path: str
    cart_key: str
    currency: str
    debug: bool
    log_file: str | None


settings = Settings(
    db_path=_get_env("SHOP_DB_PATH", "DB_PATH", default="data/shop.sqlite")
    or "data/shop.sqlite",
    cart_key=_get_env("SHOP_CART_KEY", default="cart") or "cart",
    currency=_get_env("SHOP_CURRENCY", default="$") or "$",
    debug=_get_bool("DEBUG", default=False),
    log_file=_get_env("SHOP_LOG_FILE", default=None),
)
