"""
Converter Routes.

- GET /        → index.html (작업 디렉토리 기준 탐색)
- POST /upload → 파일 업로드 → 변환 → 결과 저장 → text/plain 응답

## 업로드 실패 처리

모든 단계 실패는 500 + 단계별 러시아어 메시지 (UPLOAD_MESSAGES).
폼은 File(...) 파라미터 없이 직접 파싱:
- 필드 누락 → FILE_MISSING (500, 422 아님)
- 본문 크기 초과, 읽기 타임아웃 → FORM_PARSE_FAILED
"""

import asyncio
import logging
from pathlib import Path

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from src.app.config import Settings
from src.app.services.convert import UploadConversionService, render_response
from src.domain.constants import MESSAGE_INDEX_NOT_FOUND, UPLOAD_MESSAGES
from src.domain.errors import ErrorCodes, UploadError

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Index Page
# =============================================================================


def find_index_page(search_paths: tuple[str, ...]) -> tuple[Path, bytes] | None:
    """
    index.html 탐색.

    Args:
        search_paths: 작업 디렉토리 기준 후보 경로 (앞에서부터)

    Returns:
        (경로, 내용) 또는 None
    """
    for candidate in search_paths:
        path = Path(candidate)
        try:
            return path, path.read_bytes()
        except OSError:
            continue
    return None


@router.get("/", response_class=HTMLResponse)
async def index_page(request: Request) -> Response:
    """메인 페이지 (정적 HTML)."""
    settings: Settings = request.app.state.settings

    found = find_index_page(settings.upload.index_paths)
    if found is None:
        return PlainTextResponse(MESSAGE_INDEX_NOT_FOUND, status_code=404)

    path, content = found
    logger.info(f"Loaded index.html from: {path}")
    return HTMLResponse(content=content)


# =============================================================================
# Upload
# =============================================================================


def _upload_error(code: str, **context: object) -> UploadError:
    return UploadError(code, UPLOAD_MESSAGES[code], **context)


async def read_upload(request: Request, settings: Settings) -> tuple[bytes, str | None]:
    """
    멀티파트 폼에서 업로드 파일 읽기.

    Returns:
        (파일 내용, 파일명)

    Raises:
        UploadError: FORM_PARSE_FAILED / FILE_MISSING / FILE_READ_FAILED
    """
    max_bytes = settings.upload.max_bytes

    content_length = request.headers.get("content-length")
    if content_length is not None:
        try:
            too_large = int(content_length) > max_bytes
        except ValueError:
            too_large = False
        if too_large:
            raise _upload_error(ErrorCodes.FORM_PARSE_FAILED, reason="too_large")

    async def parse_form() -> FormData:
        return await request.form()

    try:
        form = await asyncio.wait_for(parse_form(), timeout=settings.server.read_timeout)
    except TimeoutError as e:
        raise _upload_error(ErrorCodes.FORM_PARSE_FAILED, reason="timeout") from e
    except (MultiPartException, StarletteHTTPException, ValueError) as e:
        raise _upload_error(ErrorCodes.FORM_PARSE_FAILED, reason=str(e)) from e

    try:
        upload = form.get(settings.upload.field_name)
        if not isinstance(upload, UploadFile):
            raise _upload_error(
                ErrorCodes.FILE_MISSING, field=settings.upload.field_name
            )

        try:
            data = await upload.read()
        except OSError as e:
            raise _upload_error(ErrorCodes.FILE_READ_FAILED, reason=str(e)) from e

        if len(data) > max_bytes:
            raise _upload_error(ErrorCodes.FORM_PARSE_FAILED, reason="too_large")

        return data, upload.filename
    finally:
        await form.close()


@router.post("/upload", response_class=PlainTextResponse)
async def upload_file(request: Request) -> PlainTextResponse:
    """
    파일 업로드 → 자동 변환.

    Returns:
        200: "Исходный текст:\\n<원문>\\n\\nРезультат:\\n<변환 결과>"
        500: 단계별 오류 메시지
    """
    settings: Settings = request.app.state.settings
    output_dir: Path = settings.upload.output_dir or Path.cwd()
    service = UploadConversionService(request.app.state.converter, output_dir)

    try:
        data, filename = await read_upload(request, settings)
        result = service.process(data, filename)
    except UploadError as e:
        logger.warning(f"Upload failed: {e}")
        return PlainTextResponse(e.message, status_code=500)

    return PlainTextResponse(render_response(result))
