# availability_notifier/handlers/availability.py
import logging
from typing import Dict, List, Optional

from firebase_admin import messaging

from availability_notifier.models.change_event import ChangeEvent
from availability_notifier.models.notification import NotificationPayload
from availability_notifier.models.user import UserRecord
from availability_notifier.services.notification_service import NotificationService
from availability_notifier.services.user_service import UserService

class AvailabilityChangeHandler:
    """
    사용자의 'available' 플래그가 true 로 바뀌면 다른 모든 사용자의 기기로 푸시 알림을 보내는 핸들러.
    - 조건에 맞지 않는 변경은 오류가 아니라 아무 일도 하지 않고(None) 끝납니다.
    - 조회/발송 중 발생한 모든 예외는 로그만 남기고 None 을 반환합니다. (재시도 없음)
    """
    def __init__(self, user_service: UserService, notification_service: NotificationService,
                 notification_title: str, notification_body: str):
        """
        :param user_service: 사용자 컬렉션 조회 서비스
        :param notification_service: FCM 발송 서비스
        """
        self.user_service = user_service
        self.notification_service = notification_service
        self.notification_title = notification_title
        self.notification_body = notification_body

    async def handle(self, event: ChangeEvent) -> Optional[messaging.BatchResponse]:
        if event.is_unchanged():
            logging.debug(f"available 값 변화 없음, 건너뜀 (uid: {event.uid})")
            return None
        if not event.became_available():
            logging.debug(f"available 이 true 가 아니므로 건너뜀 (uid: {event.uid}, after: {event.after!r})")
            return None

        try:
            users = await self.user_service.get_all_users()
            tokens = self.collect_tokens(users, exclude_uid=event.uid)
            if not tokens:
                logging.info(f"알림을 받을 다른 사용자가 없습니다 (uid: {event.uid})")
                return None

            payload = self.build_payload(event.uid)
            return await self.notification_service.send_multicast(tokens, payload)
        except Exception as e:
            logging.error(f"Error sending availability notifications (uid: {event.uid}): {e}", exc_info=True)
            return None

    @staticmethod
    def collect_tokens(users: Dict[str, UserRecord], exclude_uid: str) -> List[str]:
        """
        트리거한 사용자를 제외한 모든 사용자의 FCM 토큰을 순서대로 모읍니다.
        여러 사용자가 같은 토큰을 가지고 있어도 중복을 제거하지 않습니다.
        """
        tokens = []
        for uid, record in users.items():
            if uid == exclude_uid:
                continue
            if record is not None and record.has_token:
                tokens.append(record.fcm_token)
        return tokens

    def build_payload(self, tracked_uid: str) -> NotificationPayload:
        return NotificationPayload(
            title=self.notification_title,
            body=self.notification_body,
            tracked_uid=tracked_uid
        )
