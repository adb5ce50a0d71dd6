#!/usr/bin/env python3
"""Run the letter Lambda handler locally and save the PDF it returns."""

import sys
sys.path.insert(0, 'src')
import base64
import json
from pathlib import Path

from app import lambda_handler

print("Triggering letter Lambda locally...")
print("=" * 60)

try:
    result = lambda_handler({}, None)
    print("✓ Lambda execution successful!\n")
    print(f"Status code: {result['statusCode']}")
    print("Headers:")
    print(json.dumps(result["headers"], indent=2))

    filename = result["headers"]["Content-disposition"].split("filename=", 1)[-1]
    local_path = Path("/tmp") / filename
    local_path.write_bytes(base64.b64decode(result["body"]))
    print(f"\n✓ Saved to: {local_path}")
except Exception as e:
    print(f"✗ Error: {type(e).__name__}: {e}")
    import traceback
    traceback.print_exc()
