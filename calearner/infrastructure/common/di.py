from collections.abc import Callable
from typing import Annotated, TypeVar

from dependency_injector.providers import Provider
from fastapi import Depends

from calearner.application.session.orchestrator import SessionOrchestrator
from calearner.core import container

T = TypeVar("T")


def inject(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    The provider is resolved per request, so overrides applied to the
    container (e.g. in tests) take effect without rebuilding the app.
    """

    def dependency() -> T:
        return provider()

    return dependency


Orchestrator = Annotated[SessionOrchestrator, Depends(inject(container.session_orchestrator))]
