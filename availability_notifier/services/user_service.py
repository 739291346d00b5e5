# availability_notifier/services/user_service.py
import asyncio
import logging
from typing import Any, Dict, Optional

from firebase_admin import db
from marshmallow import ValidationError

from availability_notifier.models.user import UserRecord
from availability_notifier.schemas.user_schema import UserRecordSchema

class UserService:
    """
    Realtime Database 의 사용자 컬렉션을 읽는 서비스 클래스.
    읽기 전용이며, 어떤 경우에도 DB 에 쓰지 않습니다.
    """
    def __init__(self, users_path: str = '/users', app=None):
        """
        :param users_path: 사용자 레코드가 모여 있는 DB 경로
        :param app: 사용할 firebase_admin App (None 이면 기본 App)
        """
        self.users_path = users_path
        self.users_ref = db.reference(users_path, app=app)
        self.schema = UserRecordSchema()

    async def get_all_users(self) -> Dict[str, UserRecord]:
        """
        사용자 컬렉션 전체를 하나의 스냅샷으로 읽어 uid -> UserRecord 딕셔너리로 반환합니다.
        - 블로킹 SDK 호출은 워커 스레드에서 실행합니다.
        - 반환 순서는 스냅샷의 키 순서를 그대로 따릅니다.
        """
        snapshot = await asyncio.to_thread(self.users_ref.get)
        users = self._normalize_snapshot(snapshot)

        records: Dict[str, UserRecord] = {}
        for uid, entry in users.items():
            record = self._load_record(uid, entry)
            if record is not None:
                records[uid] = record

        logging.debug(f"사용자 컬렉션 조회 완료 (path: {self.users_path}, count: {len(records)})")
        return records

    @staticmethod
    def _normalize_snapshot(snapshot: Any) -> Dict[str, Any]:
        if snapshot is None:
            return {}
        # 키가 모두 작은 정수이면 RTDB 는 배열로 돌려주고, 빈 자리는 None 으로 채웁니다.
        if isinstance(snapshot, list):
            return {str(index): value for index, value in enumerate(snapshot) if value is not None}
        if isinstance(snapshot, dict):
            return snapshot
        logging.warning(f"사용자 컬렉션 형식이 올바르지 않아 무시합니다 (type: {type(snapshot).__name__})")
        return {}

    def _load_record(self, uid: str, entry: Any) -> Optional[UserRecord]:
        if not isinstance(entry, dict):
            return None
        try:
            data = self.schema.load(entry)
        except ValidationError as err:
            # 잘못된 필드만 버리고 나머지는 그대로 사용합니다.
            logging.warning(f"사용자 레코드 일부 필드가 올바르지 않습니다 (uid: {uid}): {err.messages}")
            data = err.valid_data or {}
        return UserRecord.from_dict(uid, data)
