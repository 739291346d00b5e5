# availability_notifier/services/notification_service.py
import asyncio
import logging
from typing import List

from firebase_admin import messaging

from availability_notifier.models.notification import NotificationPayload

class NotificationService:
    """
    FCM 푸시 알림 발송을 담당하는 공용 서비스 클래스.
    """
    def __init__(self, app=None):
        self.app = app

    async def send_multicast(self, tokens: List[str], payload: NotificationPayload) -> messaging.BatchResponse:
        """
        하나의 알림을 여러 기기 토큰에 한 번의 멀티캐스트 요청으로 발송합니다.
        - 재시도하지 않으며, 전송 오류는 호출자에게 그대로 전달됩니다.

        :param tokens: 발송 대상 FCM 토큰 목록 (순서와 중복을 그대로 유지)
        :param payload: 알림 제목/본문과 data 필드
        :return: 토큰별 결과와 success_count / failure_count 를 담은 BatchResponse
        """
        message = messaging.MulticastMessage(
            tokens=list(tokens),
            notification=messaging.Notification(title=payload.title, body=payload.body),
            data=payload.data
        )
        response = await asyncio.to_thread(messaging.send_each_for_multicast, message, app=self.app)

        logging.info(
            f"푸시 알림 발송 완료 (trackedUid: {payload.tracked_uid}, "
            f"success: {response.success_count}, failure: {response.failure_count})"
        )
        if response.failure_count:
            for index, send_response in enumerate(response.responses):
                if not send_response.success:
                    logging.warning(f"토큰 발송 실패 (index: {index}): {send_response.exception}")
        return response
