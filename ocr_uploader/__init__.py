"""Client-side upload form for a hosted OCR (and OCR + translate) service.

Packages:
- ocr_uploader.api: request building, dispatch and response parsing
- ocr_uploader.image: image payloads for file uploads
- ocr_uploader.form: the form state machine and its text rendering
"""
