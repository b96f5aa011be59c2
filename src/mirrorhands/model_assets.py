from __future__ import annotations

import os
import ssl
import subprocess
import urllib.request


HAND_LANDMARKER_TASK_URL = (
    "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/latest/hand_landmarker.task"
)


def _ssl_context() -> ssl.SSLContext:
    # python.org macOS builds may lack root certificates; certifi ships its own bundle.
    try:
        import certifi  # type: ignore
    except ImportError:
        return ssl.create_default_context()
    return ssl.create_default_context(cafile=certifi.where())


def _remove_partial(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)


def _download_with_urllib(url: str, part_path: str, timeout_s: int) -> None:
    with urllib.request.urlopen(url, context=_ssl_context(), timeout=timeout_s) as r, open(part_path, "wb") as f:
        data = r.read()
        if not data:
            raise OSError("empty response")
        f.write(data)


def _download_with_curl(url: str, part_path: str) -> str:
    """Returns curl's stderr; an empty model file counts as failure."""
    proc = subprocess.run(
        ["curl", "-fL", "-o", part_path, url],
        check=False,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    if proc.returncode == 0 and os.path.exists(part_path) and os.path.getsize(part_path) > 0:
        return ""
    return proc.stderr.strip() or f"curl exited with status {proc.returncode}"


def ensure_hand_landmarker_task(model_path: str, *, url: str = HAND_LANDMARKER_TASK_URL, timeout_s: int = 30) -> str:
    """
    Make sure the MediaPipe Tasks `hand_landmarker.task` exists at `model_path`.

    Downloads it from the MediaPipe model bucket when missing, first with
    urllib and then with curl. Both write to `<model_path>.part`, which only
    replaces `model_path` once complete. Raises FileNotFoundError when both fail.
    """

    if os.path.exists(model_path):
        return model_path

    os.makedirs(os.path.dirname(model_path) or ".", exist_ok=True)
    part_path = model_path + ".part"

    # Interrupted reads raise http.client errors, which are not OSErrors.
    try:
        _download_with_urllib(url, part_path, timeout_s)
    except Exception as e:
        _remove_partial(part_path)
        urllib_err = f"{type(e).__name__}: {e}"
    else:
        os.replace(part_path, model_path)
        return model_path

    try:
        curl_err = _download_with_curl(url, part_path)
    except FileNotFoundError:
        curl_err = "curl is not installed"
    if not curl_err:
        os.replace(part_path, model_path)
        return model_path
    _remove_partial(part_path)

    raise FileNotFoundError(
        "Missing MediaPipe Tasks model file and the download failed.\n\n"
        f"Expected model at: {model_path}\n"
        f"URL: {url}\n\n"
        f"urllib: {urllib_err}\n"
        f"curl: {curl_err}\n\n"
        "Download it manually:\n"
        f'  mkdir -p "{os.path.dirname(model_path) or "."}"\n'
        f'  curl -L -o "{model_path}" "{url}"\n'
    )
