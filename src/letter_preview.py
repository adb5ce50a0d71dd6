import base64

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from app import build_letter_response
from letter_content import FakerDataSource, normalize_variant
from letter_settings import (
    LETTER_FAKER_SEED,
    LETTER_FILENAME,
    LETTER_LOCALE,
    LETTER_PAST_DAYS,
    LETTER_VARIANT,
    SUPPORTED_VARIANTS,
)


# Local stand-in for the API Gateway route, so the letter can be checked
# in a browser before the image is pushed.
app = FastAPI(
    title="Letter PDF Preview",
    version="1.0.0",
    description="Render the placeholder letter locally, as the Lambda function would.",
)


def _validate_variant(variant: str | None) -> str:
    try:
        return normalize_variant(variant or LETTER_VARIANT)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _render_lambda_response(variant: str) -> dict:
    data_source = FakerDataSource(LETTER_LOCALE, seed=LETTER_FAKER_SEED, past_days=LETTER_PAST_DAYS)
    try:
        return build_letter_response(data_source, variant=variant, filename=LETTER_FILENAME)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Failed to render letter: {exc}") from exc


@app.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "default_variant": LETTER_VARIANT,
        "available_variants": sorted(SUPPORTED_VARIANTS),
        "filename": LETTER_FILENAME,
        "locale": LETTER_LOCALE,
    }


@app.get("/letter")
def download_letter(variant: str | None = Query(None)) -> Response:
    selected_variant = _validate_variant(variant)
    result = _render_lambda_response(selected_variant)
    pdf_bytes = base64.b64decode(result["body"])
    return Response(
        content=pdf_bytes,
        media_type=result["headers"]["Content-Type"],
        headers={"Content-Disposition": f'attachment; filename="{LETTER_FILENAME}"'},
    )


@app.get("/letter/lambda")
def lambda_response(variant: str | None = Query(None)) -> dict:
    selected_variant = _validate_variant(variant)
    return _render_lambda_response(selected_variant)
