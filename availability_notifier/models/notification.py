# availability_notifier/models/notification.py
from dataclasses import dataclass
from typing import Dict, Any

@dataclass(frozen=True)
class NotificationPayload:
    """
    '사용자 활성화' 푸시 알림 한 건의 내용을 정의하는 데이터클래스.
    호출마다 새로 만들어지며 저장되지 않습니다.
    """
    title: str
    body: str
    tracked_uid: str       # 방금 available 상태가 된 사용자 ID

    @property
    def data(self) -> Dict[str, str]:
        # FCM data 페이로드는 문자열 값만 허용합니다.
        return {'trackedUid': str(self.tracked_uid)}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'notification': {'title': self.title, 'body': self.body},
            'data': self.data
        }
