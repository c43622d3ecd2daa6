from typing import Protocol

from heidelberg.domain.common.value_objects import ReaderSessionId
from heidelberg.domain.reading.entities import ProgressController


class ReaderSessionRepositoryProtocol(Protocol):
    def add(self, controller: ProgressController) -> ProgressController: ...

    def find_by_id(self, session_id: ReaderSessionId) -> ProgressController | None: ...

    def remove(self, session_id: ReaderSessionId) -> bool: ...

    def count(self) -> int: ...
