# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 10:02:16 2026

@author: epicx

Fetch the April-September 2014 Uber raw trip CSVs published in the
FiveThirtyEight uber-tlc-foil-response repository.
"""

import sys
from pathlib import Path
from typing import Iterable
import requests

from config import raw_file_names

BASE_URL = (
    "https://raw.githubusercontent.com/fivethirtyeight/"
    "uber-tlc-foil-response/master/uber-trip-data"
)


def default_uber_url(filename: str) -> str:
    return f"{BASE_URL}/{filename}"


def download_file(url: str, dest_path: Path, chunk_size: int = 1 << 20) -> None:
    """
    Stream url into dest_path via a ".part" file next to it. The partial
    file is removed if the transfer fails, so dest_path only ever holds a
    complete download.
    """
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = dest_path.with_name(dest_path.name + ".part")
    print(f"Fetching {url}")

    try:
        resp = requests.get(url, stream=True, timeout=60)
        resp.raise_for_status()
        with tmp_path.open("wb") as f:
            for chunk in resp.iter_content(chunk_size=chunk_size):
                if chunk:
                    f.write(chunk)
    except requests.RequestException:
        tmp_path.unlink(missing_ok=True)
        raise

    tmp_path.replace(dest_path)
    print(f"Saved {dest_path} ({dest_path.stat().st_size:,} bytes)")


def download_uber_months(
    dest_dir: Path,
    filenames: Iterable[str] | None = None,
    url_builder=default_uber_url,
) -> list[Path]:
    """
    Download each monthly file into dest_dir, skipping files already there.
    HTTP errors are reported and the next month is tried.
    Returns the paths present in dest_dir afterwards.
    """
    dest_dir = Path(dest_dir)
    if filenames is None:
        filenames = raw_file_names()

    present = []
    for name in filenames:
        dest = dest_dir / name

        if dest.exists():
            print(f"Already exists, skipping: {dest}")
            present.append(dest)
            continue

        url = url_builder(name)
        try:
            download_file(url, dest)
            present.append(dest)
        except requests.RequestException as e:
            print(f"[WARN] Error downloading {url}: {e}")

    return present


if __name__ == "__main__":
    # Quick CLI usage: python code/download_uber_raw.py [dest_dir]
    if len(sys.argv) > 2:
        print("Usage: python download_uber_raw.py [<dest_dir>]")
        sys.exit(1)

    dest = Path(sys.argv[1]) if len(sys.argv) == 2 else Path.cwd()
    download_uber_months(dest)
