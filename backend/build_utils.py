# backend/build_utils.py
import os
import json
import uuid
import time
import requests
from pathlib import Path
from urllib.parse import urlparse

from icon_builder.icon_gen import generate_icons

# =========================
# Base directories
# =========================
TASK_BASE_DIR = os.environ.get("ICON_TASK_DIR", "/tmp/icon_tasks")

LOGO_NAME = "logo.png"
MAX_LOGO_BYTES = int(os.environ.get("ICON_MAX_LOGO_BYTES", 10 * 1024 * 1024))

# =========================
# Helpers
# =========================
def _task_dir(task_id: str) -> str:
    return os.path.join(TASK_BASE_DIR, task_id)

def _status_file(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), "status.json")

def _write_status(task_id: str, status: str, extra: dict | None = None):
    data = {
        "task_id": task_id,
        "status": status,
        "updated_at": int(time.time())
    }
    if extra:
        data.update(extra)

    Path(_task_dir(task_id)).mkdir(parents=True, exist_ok=True)
    with open(_status_file(task_id), "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

def read_status(task_id: str) -> dict | None:
    status_file = _status_file(task_id)
    if not os.path.exists(status_file):
        return None
    with open(status_file, "r", encoding="utf-8") as f:
        return json.load(f)

def task_res_dir(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), "res")

def new_task() -> str:
    task_id = str(uuid.uuid4())
    Path(_task_dir(task_id)).mkdir(parents=True, exist_ok=True)
    return task_id

def logo_path(task_id: str) -> str:
    return os.path.join(_task_dir(task_id), LOGO_NAME)

# =========================
# Logo download
# =========================
def fetch_logo(url: str, dest: str):
    """
    Download a logo image to dest, refusing anything over MAX_LOGO_BYTES
    """
    if urlparse(url).scheme not in ("http", "https"):
        raise RuntimeError(f"Unsupported logo url: {url}")

    with requests.get(url, timeout=20, stream=True) as r:
        if r.status_code != 200:
            raise RuntimeError(f"Fetch logo failed: {r.status_code} {url}")

        length = r.headers.get("Content-Length")
        if length and length.isdigit() and int(length) > MAX_LOGO_BYTES:
            raise RuntimeError(f"Logo too large: {length} bytes")

        received = 0
        with open(dest, "wb") as f:
            for chunk in r.iter_content(chunk_size=64 * 1024):
                received += len(chunk)
                if received > MAX_LOGO_BYTES:
                    raise RuntimeError(f"Logo too large: over {MAX_LOGO_BYTES} bytes")
                f.write(chunk)

# =========================
# Main entry
# =========================
def run_icon_task(task_id: str, logo_url: str | None = None) -> dict:
    """
    Export the launcher icons for a task whose logo is already in place,
    or is downloaded first from logo_url
    """
    print(f"[TASK] Start task {task_id}", flush=True)
    _write_status(task_id, "queued")

    try:
        src = logo_path(task_id)
        if logo_url:
            fetch_logo(logo_url, src)
        _write_status(task_id, "running")

        res_dir = task_res_dir(task_id)
        written = generate_icons(src, res_dir)
        files = sorted(os.path.relpath(p, res_dir).replace(os.sep, "/") for p in written)
        _write_status(task_id, "done", {"files": files})
        print(f"[TASK] Icons generated for {task_id}", flush=True)
    except Exception as e:
        _write_status(task_id, "failed", {"error": str(e)})
        print(f"[ERROR] Icon task failed: {e}", flush=True)

    return read_status(task_id)
