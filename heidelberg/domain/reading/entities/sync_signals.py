"""Signals exchanged between the progress controller and the viewport observer."""

from dataclasses import dataclass

from heidelberg.domain.common.value_objects import SectionId


@dataclass(frozen=True)
class ScrollIntent:
    """Ask the viewport to bring ``target`` to the top of the container.

    A ``confirmation_only`` intent follows a scroll the reader already made;
    the observer reconciles its slider and leaves the viewport alone.
    """

    target: SectionId
    confirmation_only: bool = False

    @property
    def page(self) -> int:
        return self.target.page


@dataclass(frozen=True)
class VisibilityEvent:
    """A section crossed the intersection threshold and now dominates the viewport."""

    section: SectionId
    intersection_ratio: float = 1.0

    @property
    def page(self) -> int:
        return self.section.page
