"""Ports the viewport observer needs from its rendering environment."""

from typing import Protocol

from heidelberg.domain.common.value_objects import SectionId


class Viewport(Protocol):
    """The scrolling container and the sections mounted in it."""

    def section_offset(self, section: SectionId) -> float | None:
        """Document offset of the section's top, None when it is not mounted."""
        ...

    def container_offset(self) -> float:
        """Document offset of the scrolling container's top."""
        ...

    def scroll_to(self, top: float) -> None: ...


class ResumeStore(Protocol):
    """Session-local storage of the last page the reader looked at."""

    def get(self, session_key: str) -> int | None: ...

    def set(self, session_key: str, page: int) -> None: ...


class InMemoryResumeStore:
    """Resume hints held in a dict, keyed by browsing session."""

    def __init__(self) -> None:
        self._pages: dict[str, int] = {}

    def get(self, session_key: str) -> int | None:
        return self._pages.get(session_key)

    def set(self, session_key: str, page: int) -> None:
        self._pages[session_key] = page
