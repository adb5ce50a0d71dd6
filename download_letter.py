#!/usr/bin/env python3
"""Download the letter through the API Gateway endpoint.

Usage: download_letter.py https://<api-id>.execute-api.<region>.amazonaws.com/ [output-path]
"""

import os
import sys
from pathlib import Path

import httpx


def filename_from_disposition(value: str, default: str = "test.pdf") -> str:
    for part in value.split(";"):
        part = part.strip()
        if part.lower().startswith("filename="):
            return part.split("=", 1)[1].strip().strip('"') or default
    return default


def main(argv: list[str]) -> int:
    url = argv[1] if len(argv) > 1 else os.getenv("LETTER_API_URL", "")
    if not url:
        print("✗ Pass the API endpoint URL or set LETTER_API_URL.")
        return 2

    response = httpx.get(url, timeout=30.0, follow_redirects=True)
    response.raise_for_status()
    content_type = response.headers.get("content-type", "")
    if not content_type.startswith("application/pdf"):
        print(f"✗ Unexpected content type: {content_type}")
        return 1

    filename = filename_from_disposition(response.headers.get("content-disposition", ""))
    output_path = Path(argv[2]) if len(argv) > 2 else Path.home() / "Desktop" / filename
    output_path.write_bytes(response.content)
    print(f"✓ Saved {len(response.content)} bytes to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
