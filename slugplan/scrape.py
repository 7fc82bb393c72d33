from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Tuple
from urllib.parse import unquote, urljoin, urlparse

import requests
from bs4 import BeautifulSoup


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent
RAW_DIR = PACKAGE_DIR / "data" / "raw"


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def _pdf_name(url: str) -> str:
    return unquote(Path(urlparse(url).path).name)


def fetch_catalog_links(index_url: str) -> List[Tuple[str, str]]:
    """
    Load a catalog index page and extract (file_name, pdf_url).

    Returns:
        List of tuples: [("anthropology.pdf", "https://.../anthropology.pdf"), ...]
    """
    resp = requests.get(index_url, timeout=30)
    resp.raise_for_status()

    soup = BeautifulSoup(resp.text, "html.parser")

    links: List[Tuple[str, str]] = []

    # links may be relative ("pdf/anthropology.pdf") or absolute
    for a in soup.select("a[href]"):
        href = (a.get("href") or "").strip()
        if not urlparse(href).path.lower().endswith(".pdf"):
            continue

        pdf_url = urljoin(index_url, href)
        name = _pdf_name(pdf_url)
        if name:
            links.append((name, pdf_url))

    # Deduplicate & sort for stable output
    return sorted(set(links))


def download_catalogs(
    index_url: str,
    raw_dir: Path | None = None,
    refresh: bool = False,
    sleep_seconds: float = 0.2,
) -> List[Path]:
    """
    Download every catalog PDF linked from index_url and cache it in raw_dir.
    Returns the paths of all cached files (new or already present).
    """
    out_dir = raw_dir if raw_dir is not None else RAW_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Fetching index: {index_url}")
    links = fetch_catalog_links(index_url)

    print(f"Found {len(links)} catalog files")

    paths: List[Path] = []
    for name, url in links:
        out_file = out_dir / name
        paths.append(out_file)

        if out_file.exists() and not refresh:
            print(f"SKIP  {name}")
            continue

        print(f"FETCH {name}")
        resp = requests.get(url, timeout=60)
        resp.raise_for_status()

        out_file.write_bytes(resp.content)
        time.sleep(sleep_seconds)

    print("Fetching finished.")
    return paths


# ---------------------------------------------------------------------------
# CLI entry
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slugplan.scrape", description="Download catalog PDFs (cache in data/raw)")
    p.add_argument("index_url", type=str, help="Page that links the catalog PDFs")
    p.add_argument("--refresh", action="store_true", help="Re-fetch and overwrite existing PDF files")
    p.add_argument("--sleep", type=float, default=0.2, help="Sleep seconds between requests")
    p.add_argument("--raw-dir", type=Path, default=RAW_DIR)
    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        download_catalogs(args.index_url.strip(), raw_dir=args.raw_dir, refresh=args.refresh, sleep_seconds=args.sleep)
    except requests.RequestException as e:
        print(f"[fetch] {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
