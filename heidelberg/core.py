from dependency_injector import containers, providers

from heidelberg.application.reading.use_cases.reader_session_use_case import ReaderSessionUseCase
from heidelberg.config import get_settings
from heidelberg.domain.reading.services.content_catalog import ContentCatalog
from heidelberg.infrastructure.reading.repositories import InMemoryReaderSessionRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Domain services (pure domain logic)
    content_catalog = providers.Singleton(ContentCatalog)

    # Repositories; sessions live for the lifetime of the process
    reader_session_repository = providers.Singleton(InMemoryReaderSessionRepository)

    # Reading module, application use cases. A single instance owns the
    # per-session locks, so it is a singleton too.
    reader_session_use_case = providers.Singleton(
        ReaderSessionUseCase,
        session_repository=reader_session_repository,
        content_catalog=content_catalog,
        max_page=settings.provided.MAX_PAGE,
        reader_path=settings.provided.READER_PATH,
        hysteresis_pages=settings.provided.HYSTERESIS_PAGES,
    )


# Initialize container
container = Container()
