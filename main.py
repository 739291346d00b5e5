# main.py
# Cloud Functions for Firebase 진입점. 배포 시 이 파일의 함수들이 트리거로 등록됩니다.
import asyncio

from firebase_functions import db_fn

from availability_notifier import create_handler
from availability_notifier.core.config import get_config
from availability_notifier.models.change_event import ChangeEvent

# 콜드 스타트 시 한 번만 Firebase 초기화 및 서비스 생성
config = get_config()
handler = create_handler()

@db_fn.on_value_written(reference=f"{config.USERS_PATH.rstrip('/')}/{{uid}}/available")
def on_availability_change(event: db_fn.Event[db_fn.Change]) -> None:
    """'/users/{uid}/available' 쓰기마다 호출됩니다."""
    asyncio.run(handler.handle(ChangeEvent.from_database_event(event)))
