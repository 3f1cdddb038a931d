"""
Domain Constants: 변환기 전역 상수.

모스 부호 테이블, 구분자, 업로드 정책, 사용자 메시지 등
시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Morse Code Alphabet (기본 테이블: 키릴 문자)
# =============================================================================
# 순서가 의미를 가짐: 역테이블은 first-wins 이므로 Ь가 Ъ보다 먼저 와야 함
# (Ь/Ъ 모두 "-..-")

CYRILLIC_LETTERS: tuple[tuple[str, str], ...] = (
    ("А", ".-"),
    ("Б", "-..."),
    ("В", ".--"),
    ("Г", "--."),
    ("Д", "-.."),
    ("Е", "."),
    ("Ж", "...-"),
    ("З", "--.."),
    ("И", ".."),
    ("Й", ".---"),
    ("К", "-.-"),
    ("Л", ".-.."),
    ("М", "--"),
    ("Н", "-."),
    ("О", "---"),
    ("П", ".--."),
    ("Р", ".-."),
    ("С", "..."),
    ("Т", "-"),
    ("У", "..-"),
    ("Ф", "..-."),
    ("Х", "...."),
    ("Ц", "-.-."),
    ("Ч", "---."),
    ("Ш", "----"),
    ("Щ", "--.-"),
    ("Ь", "-..-"),
    ("Ы", "-.--"),
    ("Ъ", "-..-"),
    ("Э", "..-.."),
    ("Ю", "..--"),
    ("Я", ".-.-"),
)

DIGITS: tuple[tuple[str, str], ...] = (
    ("1", ".----"),
    ("2", "..---"),
    ("3", "...--"),
    ("4", "....-"),
    ("5", "....."),
    ("6", "-...."),
    ("7", "--..."),
    ("8", "---.."),
    ("9", "----."),
    ("0", "-----"),
)

PUNCTUATION: tuple[tuple[str, str], ...] = (
    (".", "......"),
    (",", ".-.-.-"),
    (":", "---..."),
    ("?", "..--.."),
    ("'", ".----."),
    ("-", "-....-"),
    ("/", "-..-."),
    ("(", "-.--."),
    (")", "-.--.-"),
    ('"', ".-..-."),
)

# 코드에 허용되는 문자
CODE_ALPHABET = frozenset(".-")

# =============================================================================
# Separators (구분자)
# =============================================================================
# 단어 구분자 기본값 = 문자 구분자 + SPACE_CODE + 문자 구분자
# (테이블에 " " 항목이 있으면 그 코드를 대신 사용)

DEFAULT_CHAR_SEPARATOR = " "
SPACE_CODE = " "
SPACE_SYMBOL = " "

# 입력에 이 문자 중 하나라도 있으면 모스 부호로 간주
MORSE_MARKERS = frozenset(".-/")

# =============================================================================
# Unknown Symbol Policies
# =============================================================================

UNKNOWN_POLICY_IGNORE = "ignore"
UNKNOWN_POLICY_PLACEHOLDER = "placeholder"
UNKNOWN_POLICY_STRICT = "strict"
DEFAULT_PLACEHOLDER = "?"

# =============================================================================
# Upload Policy (업로드 정책)
# =============================================================================

UPLOAD_FIELD_NAME = "myFile"
UPLOAD_MAX_BYTES = 10 << 20  # 10 MiB
UPLOAD_ENCODING = "utf-8-sig"  # BOM 있으면 제거

# 결과 파일명: <UTC yyyyMMdd_HHmmss><원본 확장자>
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# index.html 탐색 경로 (작업 디렉토리 기준, 앞에서부터)
INDEX_SEARCH_PATHS = ("index.html", "../index.html")

# =============================================================================
# Server (서버 기본값)
# =============================================================================

SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8080
SERVER_READ_TIMEOUT = 5.0
SERVER_WRITE_TIMEOUT = 10.0
SERVER_IDLE_TIMEOUT = 15.0

# =============================================================================
# User-facing Messages (사용자 메시지)
# =============================================================================

RESPONSE_ORIGINAL_HEADER = "Исходный текст:"
RESPONSE_RESULT_HEADER = "Результат:"

MESSAGE_INDEX_NOT_FOUND = "index.html не найден"

UPLOAD_MESSAGES = {
    "FORM_PARSE_FAILED": "Ошибка при парсинге формы",
    "FILE_MISSING": "Ошибка при получении файла",
    "FILE_READ_FAILED": "Ошибка при чтении файла",
    "CONVERT_FAILED": "Ошибка при конвертации",
    "FILE_CREATE_FAILED": "Ошибка при создании файла",
    "FILE_WRITE_FAILED": "Ошибка при записи файла",
}
