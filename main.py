"""
Entry point and facade for the OCR upload form.

This module exposes a stable API and a CLI that submits one image to the
hosted OCR service and prints what the form would display.

Packages:
- ocr_uploader.api: HTTP client, request builder and response parsing
- ocr_uploader.image: Image payloads for uploads
- ocr_uploader.form: Form state machine (`OcrUploader`) and text rendering
"""

from __future__ import annotations

from typing import List, Optional

# Configuration
from ocr_uploader.config import (
    CONFIG_PATH as CONFIG_PATH,
    ServiceSettings,
    load_service_settings,
)

# Service API
from ocr_uploader.api import (
    LANGUAGES,
    InputMode,
    UrlInput,
    Workflow,
    build_request,
    get_service_client,
    normalize_and_validate_target_language,
    submit,
)
from ocr_uploader.errors import (
    OcrUploaderError,
    ServerError,
    TransportError,
    ValidationError,
)
from ocr_uploader.image import FileInput

# Form
from ocr_uploader.form import OcrUploader, ResultState, render_state

__all__ = [
    # config
    "CONFIG_PATH",
    "ServiceSettings",
    "load_service_settings",
    # api
    "LANGUAGES",
    "InputMode",
    "UrlInput",
    "FileInput",
    "Workflow",
    "build_request",
    "get_service_client",
    "normalize_and_validate_target_language",
    "submit",
    # errors
    "OcrUploaderError",
    "ServerError",
    "TransportError",
    "ValidationError",
    # form
    "OcrUploader",
    "ResultState",
    "render_state",
]


def _cli(argv: Optional[List[str]] = None) -> int:
    """CLI for submitting an image to the OCR service.

    --image / -i: Path to a local image to upload
    --url / -u: URL of a remote image
    --translate: Use the OCR + translate endpoint
    --to / -t: Target language code (es|en|fr|de|it|pt); requires --translate
    --timeout: Request timeout in seconds (<=0 means no timeout)
    --api-base: Service base URL (default: from config/service.json)

    Returns the process exit code: 0 on success, 1 if the form shows an error.
    """
    import argparse

    codes = [code for code, _ in LANGUAGES]
    parser = argparse.ArgumentParser(description="Extract (and optionally translate) text from an image using the OCR service.")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--image", "-i", type=str, help="Path to a local image to upload")
    source.add_argument("--url", "-u", type=str, help="URL of a remote image")
    parser.add_argument("--translate", action="store_true", help="Also translate the recognized text")
    parser.add_argument("--to", "-t", type=str, default=None, help=f"Target language code: {', '.join(codes)} (default: from config)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (set 0 or negative for no timeout)")
    parser.add_argument("--api-base", type=str, default=None, help="Base URL of the OCR service")

    args = parser.parse_args(argv)

    if args.to and not args.translate:
        print("--to only applies together with --translate.")
        return 2

    settings = load_service_settings().with_overrides(api_base=args.api_base, timeout=args.timeout)
    form = OcrUploader(settings=settings)
    try:
        if args.to:
            try:
                form.set_target_language(args.to)
            except ValueError as e:
                print(str(e))
                return 2

        if args.url is not None:
            form.set_input_mode(InputMode.URL)
            form.set_image_url(args.url)
        elif args.image:
            try:
                form.select_file(args.image)
            except OSError as e:
                print(f"Could not read image: {e}")
                return 2

        workflow = Workflow.OCR_TRANSLATE if args.translate else Workflow.OCR
        print(f"Submitting to /{workflow.path} at {settings.api_base}")
        ok = form.submit(workflow)
        print(render_state(form))
        return 0 if ok else 1
    finally:
        form.close()


if __name__ == "__main__":
    raise SystemExit(_cli())
