import os
import warnings
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Single place that loads `.env`. The project-root `.env` wins over the shell
# environment so that editing it always takes effect.
load_dotenv(override=True)


def _get_env_float(key: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a float, got {raw}") from exc


# ===== Paths =====
#
# NOTE:
# - All code lives under `<repo>/backend/`.
# - Runtime artifacts (the local storage file) live under `<repo>/files/`.

_BACKEND_DIR = Path(__file__).resolve().parents[2]  # backend/

if _BACKEND_DIR.name == "backend":
    PROJECT_ROOT = _BACKEND_DIR.parent
else:
    PROJECT_ROOT = Path.cwd()

RUNTIME_ROOT = Path(os.getenv("RUNTIME_ROOT", PROJECT_ROOT / "files")).expanduser()


# ===== Local storage =====

# file | memory | none
_DEFAULT_STORAGE_BACKEND = "file"
_raw_backend = os.getenv("MOVIETRACK_STORAGE_BACKEND", _DEFAULT_STORAGE_BACKEND).strip().lower()
if _raw_backend not in {"file", "memory", "none"}:
    warnings.warn(
        "MOVIETRACK_STORAGE_BACKEND must be one of file/memory/none; using default.",
        RuntimeWarning,
        stacklevel=2,
    )
    _raw_backend = _DEFAULT_STORAGE_BACKEND
STORAGE_BACKEND = _raw_backend

STORAGE_PATH = Path(
    os.getenv("MOVIETRACK_STORAGE_PATH", RUNTIME_ROOT / "local_storage.json")
).expanduser()

# Every persisted key lives under this prefix.
STORAGE_NAMESPACE = os.getenv("MOVIETRACK_STORAGE_NAMESPACE", "movieTrack").strip() or "movieTrack"


# ===== TMDB =====

TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3").strip()
TMDB_IMAGE_BASE_URL = os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p").strip()
# v3 api key (query param) or v4 read token (bearer); either one is enough.
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "").strip()
TMDB_API_TOKEN = os.getenv("TMDB_API_TOKEN", "").strip()
TMDB_LANGUAGE = os.getenv("TMDB_LANGUAGE", "en-US").strip() or "en-US"
TMDB_TIMEOUT_S = _get_env_float("TMDB_TIMEOUT_S", 10.0) or 10.0
