"""Upload form: input capture, validation and the submit state machine.

`OcrUploader` holds everything the form displays. Setter methods mirror the
form's controls; `submit` runs one request through

    IDLE -> SUBMITTING -> SUCCESS | FAILED

and always ends with `in_progress` cleared. Errors are turned into the
error slot of `state` and never raised to the caller.
"""

from __future__ import annotations

from typing import Optional, Union

import httpx

from ocr_uploader.api import (
    ImageSource,
    InputMode,
    UrlInput,
    Workflow,
    get_service_client,
    normalize_and_validate_target_language,
    submit as submit_request,
)
from ocr_uploader.config import DEFAULT_TARGET_LANGUAGE, ServiceSettings, load_service_settings
from ocr_uploader.errors import OcrUploaderError, TransportError, ValidationError
from ocr_uploader.image import FileInput

from .model import FormStatus, ResultState

MISSING_FILE_MESSAGE = "Select an image first."
MISSING_URL_MESSAGE = "Enter an image URL."


class OcrUploader:
    """State of one upload form for the lifetime of the view."""

    def __init__(
        self,
        settings: Optional[ServiceSettings] = None,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or load_service_settings()
        self._owns_client = client is None
        self._client = client if client is not None else get_service_client(self.settings, transport=transport)

        self.input_mode = InputMode.FILE
        self.file: Optional[FileInput] = None
        self.image_url = ""
        try:
            self.target_language = normalize_and_validate_target_language(self.settings.default_target_language)
        except ValueError as e:
            print(f"Warning: {e} Falling back to '{DEFAULT_TARGET_LANGUAGE}'.")
            self.target_language = DEFAULT_TARGET_LANGUAGE

        self.state = ResultState()
        self.status = FormStatus.IDLE
        self.in_progress = False
        self._closed = False

    # -- inputs ---------------------------------------------------------

    def _reset_results(self) -> None:
        self.state.clear()
        if not self.in_progress:
            self.status = FormStatus.IDLE

    def set_input_mode(self, mode: Union[InputMode, str]) -> None:
        self.input_mode = InputMode(mode)
        self._reset_results()

    def select_file(self, file: Union[FileInput, str, None]) -> None:
        """Select the image to upload; a string is read as a file path."""
        if isinstance(file, str):
            file = FileInput.from_path(file)
        self.file = file
        self._reset_results()

    def set_image_url(self, url: Optional[str]) -> None:
        self.image_url = url or ""
        self._reset_results()

    def set_target_language(self, code: str) -> None:
        self.target_language = normalize_and_validate_target_language(code)

    def validate(self) -> ImageSource:
        """Return the active image source.

        Doxygen:
        - @return: FileInput in file mode, UrlInput in URL mode.
        - @throws ValidationError: If the active mode has no value.
        """
        if self.input_mode is InputMode.FILE:
            if self.file is None:
                raise ValidationError(MISSING_FILE_MESSAGE)
            return self.file
        if not self.image_url:
            raise ValidationError(MISSING_URL_MESSAGE)
        return UrlInput(self.image_url)

    # -- submission -----------------------------------------------------

    @property
    def can_submit(self) -> bool:
        return not self.in_progress and not self._closed

    def _fail(self, message: str) -> None:
        self.state.clear()
        self.state.error_message = message
        self.status = FormStatus.FAILED

    def submit(self, workflow: Union[Workflow, str] = Workflow.OCR) -> bool:
        """Validate, send one request and update the displayed state.

        Doxygen:
        - @param workflow: Workflow.OCR or Workflow.OCR_TRANSLATE.
        - @return: True if a result is displayed, False otherwise (error, ignored or discarded).
        """
        workflow = Workflow(workflow)
        if not self.can_submit:
            return False

        try:
            source = self.validate()
        except ValidationError as e:
            self._fail(str(e))
            return False

        self.state.clear()
        self.in_progress = True
        self.status = FormStatus.SUBMITTING
        try:
            try:
                result = submit_request(self._client, workflow, source, self.target_language)
            except OcrUploaderError as e:
                error: OcrUploaderError = e
            except Exception as e:
                error = TransportError(e)
            else:
                if self._closed:
                    return False
                self.state.extracted_text = result.extracted_text
                self.state.translated_text = result.translated_text
                self.state.detected_language = result.detected_language
                self.status = FormStatus.SUCCESS
                return True

            if isinstance(error, TransportError):
                print(f"Warning: request to /{workflow.path} failed: {error.cause}")
            if self._closed:
                return False
            self._fail(str(error))
            return False
        finally:
            self.in_progress = False
            if self._closed:
                self._release_client()

    def upload(self) -> bool:
        return self.submit(Workflow.OCR)

    def upload_and_translate(self) -> bool:
        return self.submit(Workflow.OCR_TRANSLATE)

    # -- lifecycle ------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the form. A response still in flight is discarded when it arrives."""
        self._closed = True
        if not self.in_progress:
            self._release_client()

    def _release_client(self) -> None:
        if self._owns_client and not self._client.is_closed:
            self._client.close()
