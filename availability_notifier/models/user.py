# availability_notifier/models/user.py
from dataclasses import dataclass
from typing import Optional, Dict, Any

@dataclass
class UserRecord:
    """
    Realtime Database '/users/{uid}' 노드의 구조를 정의하는 데이터클래스.
    두 필드 모두 선택 항목이며, 값이 없으면 None 입니다.
    """
    uid: str
    available: Optional[bool] = None
    fcm_token: Optional[str] = None # 푸시 알림을 위한 FCM 토큰 (DB 키: fcmToken)

    @property
    def has_token(self) -> bool:
        return bool(self.fcm_token)

    @classmethod
    def from_dict(cls, uid: str, data: Dict[str, Any]) -> 'UserRecord':
        return cls(
            uid=uid,
            available=data.get('available'),
            fcm_token=data.get('fcm_token')
        )
