"""
app/cache/storage.py
====================
브라우저 ``localStorage`` 를 대신하는 **키-값 블롭 저장소** 모듈입니다

캐시·즐겨찾기 스토어는 고정 키 아래에 JSON 문자열 하나를 통째로 읽고 씁니다.
저장 매체는 아래 세 연산만 제공하면 됩니다.

* ``read(key)``   : 블롭 문자열, 없으면 ``None``
* ``write(key, blob)``
* ``delete(key)`` : 없는 키 삭제는 무시

구현체
------
* `MemoryStorage` : dict 기반. 테스트용이며 ``available=False`` 로 두면
  모든 호출이 `StorageUnavailableError` 를 던집니다.
* `FileStorage`   : ``<directory>/<key>.json`` 파일 하나가 키 하나.
  임시 파일에 쓴 뒤 ``Path.replace`` 로 교체하므로 반쯤 쓰인 블롭을 읽지 않습니다.

⚠️  여러 프로세스가 같은 디렉터리를 쓰면 마지막 쓰기가 이깁니다(병합 없음).
"""

from pathlib import Path
from typing import Dict, Optional, Protocol

from app.cache.exceptions import CorruptPersistedDataError, StorageUnavailableError


class KeyValueStorage(Protocol):
    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, blob: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """프로세스 메모리 dict 에 블롭을 보관하는 저장소."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.blobs: Dict[str, str] = dict(initial or {})
        self.available = True

    def _check(self):
        if not self.available:
            raise StorageUnavailableError("메모리 저장소가 비활성화되어 있습니다")

    def read(self, key: str) -> Optional[str]:
        self._check()
        return self.blobs.get(key)

    def write(self, key: str, blob: str) -> None:
        self._check()
        self.blobs[key] = blob

    def delete(self, key: str) -> None:
        self._check()
        self.blobs.pop(key, None)


class FileStorage:
    """디렉터리 아래 ``<key>.json`` 파일로 블롭을 보관하는 저장소."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            if not path.exists():
                return None
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CorruptPersistedDataError(key, f"UTF-8 디코딩 실패: {e}") from e
        except OSError as e:
            raise StorageUnavailableError(f"읽기 실패 {path}: {e}") from e

    def write(self, key: str, blob: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(blob, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                pass
            raise StorageUnavailableError(f"쓰기 실패 {path}: {e}") from e

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageUnavailableError(f"삭제 실패 {path}: {e}") from e
