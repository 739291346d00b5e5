# availability_notifier/models/change_event.py
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class ChangeEvent:
    """
    '/users/{uid}/available' 쓰기 한 건을 나타내는 데이터클래스.
    트리거가 호출될 때마다 한 번 만들어지고 한 번 소비됩니다.
    """
    uid: str
    before: Any = None
    after: Any = None

    @classmethod
    def from_database_event(cls, event) -> 'ChangeEvent':
        """
        firebase_functions의 db_fn.Event[db_fn.Change] 객체를 ChangeEvent로 변환합니다.

        :param event: params['uid']와 data.before / data.after 를 가진 트리거 이벤트
        """
        return cls(
            uid=event.params['uid'],
            before=event.data.before,
            after=event.data.after
        )

    def is_unchanged(self) -> bool:
        # 타입까지 같아야 같은 값으로 봅니다. (1 과 True 는 다른 값)
        if self.before is self.after:
            return True
        return type(self.before) is type(self.after) and self.before == self.after

    def became_available(self) -> bool:
        return not self.is_unchanged() and self.after is True
