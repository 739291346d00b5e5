# availability_notifier/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

DEFAULT_NOTIFICATION_TITLE = 'Usuario disponible'
DEFAULT_NOTIFICATION_BODY = 'Un usuario ha activado disponibilidad. Toca para seguirlo.'

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # Realtime Database 주소. Cloud Functions 환경에서는 플랫폼이 주입한 값을 그대로 사용합니다.
    FIREBASE_DATABASE_URL = os.getenv('FIREBASE_DATABASE_URL')
    # 서비스 계정 키 파일 경로. 비어 있으면 플랫폼의 기본 자격 증명(Application Default)을 사용합니다.
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

    # 사용자 레코드가 모여 있는 경로 (uid -> {available, fcmToken})
    USERS_PATH = os.getenv('USERS_PATH', '/users')

    # 푸시 알림 문구
    NOTIFICATION_TITLE = os.getenv('NOTIFICATION_TITLE', DEFAULT_NOTIFICATION_TITLE)
    NOTIFICATION_BODY = os.getenv('NOTIFICATION_BODY', DEFAULT_NOTIFICATION_BODY)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    DEBUG = False
    TESTING = False

class ProductionConfig(Config):
    """배포된 Cloud Functions 환경을 위한 설정 클래스입니다."""
    pass

class DevelopmentConfig(Config):
    """로컬 에뮬레이터 개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
    # 개발용 서비스 계정 키가 따로 있으면 우선 사용합니다.
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    FIREBASE_DATABASE_URL = os.getenv('TEST_FIREBASE_DATABASE_URL', 'https://test-project-default-rtdb.firebaseio.com')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

# APP_ENV 값('production', 'development', 'testing')에 따라 create_handler에서 설정 클래스를 고릅니다.
config_by_name = dict(
    production=ProductionConfig,
    development=DevelopmentConfig,
    testing=TestingConfig
)

def get_config(config_name=None):
    """
    이름으로 설정 클래스를 찾아 반환합니다.
    이름이 없으면 APP_ENV 환경 변수를, 그것도 없으면 'production'을 사용합니다.
    """
    name = config_name or os.getenv('APP_ENV', 'production')
    try:
        return config_by_name[name]
    except KeyError:
        raise ValueError(f"알 수 없는 APP_ENV 값입니다: '{name}' (사용 가능: {', '.join(config_by_name)})")
