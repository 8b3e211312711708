"""App - 타입 키 리소스 컨테이너 + 기본 앱 구성

리소스는 타입당 하나. 같은 타입을 다시 넣으면 교체된다.

    app = main_app()
    speed = app.resource(GameSpeed)
"""

from typing import Any, Dict, Optional, Type, TypeVar

from sim.config import settings
from sim.core.logging import get_logger
from sim.core.rng import Rng
from sim.core.time import GameSpeed

logger = get_logger(__name__)

R = TypeVar("R")


class App:
    """시뮬레이션 리소스 보관소"""

    def __init__(self) -> None:
        self._resources: Dict[type, Any] = {}

    def insert_resource(self, resource: Any) -> "App":
        self._resources[type(resource)] = resource
        logger.debug(f"리소스 등록: {type(resource).__qualname__}")
        return self

    def resource(self, resource_type: Type[R]) -> R:
        """등록된 리소스 반환. 미등록이면 KeyError."""
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(
                f"resource not registered: {resource_type.__qualname__}"
            ) from None

    def get_resource(self, resource_type: Type[R]) -> Optional[R]:
        return self._resources.get(resource_type)

    def has_resource(self, resource_type: type) -> bool:
        return resource_type in self._resources

    @property
    def resource_count(self) -> int:
        return len(self._resources)


def main_app() -> App:
    """GameSpeed, Rng가 설치된 기본 앱"""
    app = App()
    app.insert_resource(GameSpeed(settings.GAME_SPEED))
    app.insert_resource(Rng(state=settings.RNG_SEED))
    return app
