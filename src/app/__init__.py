"""
App layer: HTTP 서버 (FastAPI).

역할:
- index.html 제공, 파일 업로드 처리
- 결과 파일 저장
- ⚠️ 변환 로직 없음 (src.morse에 위임)
"""
