import base64
import json
import logging
from datetime import datetime

from letter_content import FakerDataSource, LetterDataSource, generate_letter_content
from letter_render import render_letter_pdf
from letter_settings import (
    LETTER_DATE_FORMAT,
    LETTER_FAKER_SEED,
    LETTER_FILENAME,
    LETTER_LOCALE,
    LETTER_PAST_DAYS,
    LETTER_VARIANT,
    LOG_LEVEL,
)


LOGGER = logging.getLogger(__name__)
LOGGER.setLevel(LOG_LEVEL)

PDF_CONTENT_TYPE = "application/pdf"


def build_pdf_response(pdf_bytes: bytes, filename: str = LETTER_FILENAME) -> dict:
    """Shape rendered bytes as an API Gateway proxy response.

    Content-Length is the decoded byte count; API Gateway decodes the body
    before it reaches the client.
    """
    return {
        "statusCode": 200,
        "headers": {
            "Content-Length": str(len(pdf_bytes)),
            "Content-Type": PDF_CONTENT_TYPE,
            "Content-disposition": f"attachment;filename={filename}",
        },
        "isBase64Encoded": True,
        "body": base64.b64encode(pdf_bytes).decode("ascii"),
    }


def build_letter_response(
    data_source: LetterDataSource,
    *,
    variant: str = LETTER_VARIANT,
    filename: str = LETTER_FILENAME,
    now: datetime | None = None,
) -> dict:
    content = generate_letter_content(
        data_source,
        variant=variant,
        now=now,
        date_format=LETTER_DATE_FORMAT,
    )
    pdf_bytes = render_letter_pdf(content)
    LOGGER.info("Rendered %s letter: %d bytes", variant, len(pdf_bytes))
    return build_pdf_response(pdf_bytes, filename)


def lambda_handler(event: dict | None, _context: object) -> dict:
    LOGGER.info("Received event: %s", json.dumps(event, default=str))
    data_source = FakerDataSource(LETTER_LOCALE, seed=LETTER_FAKER_SEED, past_days=LETTER_PAST_DAYS)
    try:
        return build_letter_response(data_source, variant=LETTER_VARIANT, filename=LETTER_FILENAME)
    except Exception:
        LOGGER.exception("Letter generation failed")
        raise
