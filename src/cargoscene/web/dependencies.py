"""FastAPI dependency injection for scene services."""

from typing import Annotated

from fastapi import Depends

from cargoscene.application.commands import GenerateSceneCommand
from cargoscene.application.factory import ServiceFactory, get_factory


def get_service_factory() -> ServiceFactory:
    """Get the process-wide ServiceFactory."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateSceneCommand:
    """Dependency for GenerateSceneCommand."""
    return factory.create_generate_command()


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateSceneCommand, Depends(get_generate_command)]
