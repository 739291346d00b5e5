# availability_notifier/schemas/user_schema.py
from marshmallow import Schema, fields, EXCLUDE

class UserRecordSchema(Schema):
    """
    Realtime Database 의 사용자 노드를 읽을 때 사용하는 스키마.
    알림 발송에 필요 없는 다른 필드는 무시합니다.
    """
    class Meta:
        unknown = EXCLUDE

    available = fields.Bool(allow_none=True, load_default=None)
    fcm_token = fields.Str(data_key='fcmToken', allow_none=True, load_default=None)
