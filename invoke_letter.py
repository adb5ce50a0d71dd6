#!/usr/bin/env python3
"""Invoke the deployed letter function and save the PDF it returns.

Usage: invoke_letter.py [function-name] [output-path]
"""

import base64
import json
import os
import sys
from pathlib import Path

import boto3


def decode_letter_payload(payload: dict) -> bytes:
    if payload.get("FunctionError"):
        raise RuntimeError(f"Function failed: {payload.get('errorMessage', payload)}")
    if payload.get("statusCode") != 200:
        raise RuntimeError(f"Unexpected status code: {payload.get('statusCode')}")
    body = payload.get("body") or ""
    if payload.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("latin-1")


def invoke_letter(lambda_client, function_name: str) -> bytes:
    response = lambda_client.invoke(
        FunctionName=function_name,
        InvocationType="RequestResponse",
        Payload=json.dumps({}).encode("utf-8"),
    )
    payload = json.loads(response["Payload"].read())
    if response.get("FunctionError"):
        payload = {"FunctionError": response["FunctionError"], **payload}
    return decode_letter_payload(payload)


def main(argv: list[str]) -> int:
    function_name = argv[1] if len(argv) > 1 else os.getenv("LETTER_FUNCTION_NAME", "letter-pdf-lambda")
    output_path = Path(argv[2]) if len(argv) > 2 else Path.home() / "Desktop" / "test.pdf"
    region = os.getenv("AWS_REGION", "us-east-1")

    lambda_client = boto3.client("lambda", region_name=region)
    print(f"Invoking {function_name} in {region}...")
    pdf_bytes = invoke_letter(lambda_client, function_name)
    output_path.write_bytes(pdf_bytes)
    print(f"✓ Saved {len(pdf_bytes)} bytes to: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
