import os
from typing import NamedTuple, Optional
from dotenv import load_dotenv

ENV_PATH = os.path.join('config', '.env')

class Settings(NamedTuple):
    rates_csv: Optional[str]
    source_currency: Optional[str]
    bridge_source: Optional[str]
    show_matrices: bool
    export_dir: Optional[str]

def env_bool(key: str, default: bool) -> bool:
    v = os.getenv(key)
    if v is None: return default
    return str(v).lower() in ('1', 'true', 'yes', 'y', 'on')

def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    v = (os.getenv(key) or '').strip()
    return v or default

def load_settings(env_path: str = ENV_PATH) -> Settings:
    # real environment wins over the .env file
    load_dotenv(dotenv_path=env_path, override=False)
    return Settings(
        rates_csv=env_str('RATES_CSV'),
        source_currency=env_str('SOURCE_CURRENCY'),
        bridge_source=env_str('BRIDGE_SOURCE'),
        show_matrices=env_bool('SHOW_MATRICES', False),
        export_dir=env_str('EXPORT_DIR'),
    )
