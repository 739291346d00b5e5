# availability_notifier/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
import firebase_admin
from firebase_admin import credentials

# - 설정
from availability_notifier.core.config import get_config

# - 서비스 / 핸들러
from availability_notifier.services.user_service import UserService
from availability_notifier.services.notification_service import NotificationService
from availability_notifier.handlers.availability import AvailabilityChangeHandler

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'

def init_firebase(config) -> firebase_admin.App:
    """
    firebase_admin 기본 App 을 프로세스당 한 번만 초기화합니다.
    이미 초기화되어 있으면 기존 App 을 그대로 반환합니다.
    """
    if firebase_admin._apps:
        return firebase_admin.get_app()

    options = {}
    if config.FIREBASE_DATABASE_URL:
        options['databaseURL'] = config.FIREBASE_DATABASE_URL

    cred = None
    cred_path = config.FIREBASE_CREDENTIALS_PATH
    if cred_path:
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
        cred = credentials.Certificate(cred_path)

    # cred 가 None 이면 Cloud Functions 런타임의 기본 자격 증명을 사용합니다.
    return firebase_admin.initialize_app(cred, options or None)

def create_handler(config_name=None) -> AvailabilityChangeHandler:
    """
    핸들러 팩토리 함수.
    설정 선택, Firebase 초기화, 로깅 설정, 서비스 생성 및 주입을 차례로 수행합니다.
    """
    # =====================================================================================
    # 3. 설정 선택 및 로깅
    # =====================================================================================
    config = get_config(config_name)
    logging.basicConfig(level=config.LOG_LEVEL, format=LOG_FORMAT)

    # =====================================================================================
    # 4. 외부 서비스 초기화
    # =====================================================================================
    app = init_firebase(config)

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 핸들러에 주입 (의존성 주입)
    # =====================================================================================
    handler = AvailabilityChangeHandler(
        user_service=UserService(users_path=config.USERS_PATH, app=app),
        notification_service=NotificationService(app=app),
        notification_title=config.NOTIFICATION_TITLE,
        notification_body=config.NOTIFICATION_BODY
    )

    logging.info(f"Availability handler created (users path: '{config.USERS_PATH}').")
    return handler
