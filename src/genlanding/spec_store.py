from __future__ import annotations

import logging

from .models.spec import Section, UISpecification

logger = logging.getLogger(__name__)


class SpecificationStore:
    """Holds the specification being edited.

    Owned by a single event loop; every change swaps in a new immutable
    specification instead of mutating the current one.
    """

    def __init__(self) -> None:
        self._spec: UISpecification | None = None

    @property
    def spec(self) -> UISpecification | None:
        return self._spec

    def replace(self, spec: UISpecification | None) -> None:
        self._spec = spec
        logger.debug("Replaced specification", extra={"loaded": spec is not None})

    def reset(self) -> None:
        self.replace(None)

    def get_section(self, section_id: str) -> Section | None:
        if self._spec is None:
            return None
        for section in self._spec.sections:
            if section.id == section_id:
                return section
        return None

    def update_section(self, updated: Section) -> bool:
        """Swap in ``updated`` for the section sharing its id.

        Returns False, leaving the store untouched, when nothing is loaded or
        no section matches. Raises ``pydantic.ValidationError``, again leaving
        the store untouched, when the resulting page would be invalid.
        """
        spec = self._spec
        if spec is None or self.get_section(updated.id) is None:
            return False
        sections = [updated if section.id == updated.id else section for section in spec.sections]
        # Built through the constructor so the page-level checks run again.
        self._spec = UISpecification(name=spec.name, theme=spec.theme, sections=sections)
        return True


__all__ = ["SpecificationStore"]
