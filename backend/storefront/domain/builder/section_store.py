from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from storefront.domain.invariants.exceptions import PersistenceError
from .section import Section, generate_section_id

logger = logging.getLogger(__name__)

SectionLike = Union[Section, Mapping[str, Any]]


def _renumber(sections: List[Section]) -> List[Section]:
    for index, section in enumerate(sections):
        section.position = index
    return sections


class SectionStore:
    """
    Editing state for the sections of one page.

    One instance belongs to one editing session. Every mutation is
    synchronous, never raises, and flips ``is_dirty`` together with the data
    change. Positions are always the dense range ``0..len-1``.

    ``save`` is the only call that reaches the persistence gateway. A failed
    save leaves the store dirty and re-raises, so the caller decides whether
    to retry.
    """

    def __init__(self, page_id: str, gateway):
        self.page_id = page_id
        self.gateway = gateway

        self._sections: List[Section] = []
        self.selected_section_id: Optional[str] = None
        self.is_dirty = False
        self.is_saving = False

        # Bumped on every mutation; lets a save tell whether the data it
        # persisted is still what the store holds.
        self._revision = 0

    # -------------------------------------------------
    # Read access
    # -------------------------------------------------
    @property
    def sections(self) -> List[Section]:
        return list(self._sections)

    def get(self, section_id: str) -> Optional[Section]:
        for section in self._sections:
            if section.id == section_id:
                return section
        return None

    def _index_of(self, section_id: str) -> int:
        for index, section in enumerate(self._sections):
            if section.id == section_id:
                return index
        return -1

    def __len__(self) -> int:
        return len(self._sections)

    def _touch(self) -> None:
        self._revision += 1
        self.is_dirty = True

    # -------------------------------------------------
    # Mutations
    # -------------------------------------------------
    def load(self, sections: Iterable[SectionLike]) -> None:
        loaded = []
        for item in sections:
            if isinstance(item, Section):
                loaded.append(copy.deepcopy(item))
                continue
            try:
                loaded.append(Section.from_mapping(item))
            except (AttributeError, TypeError, ValueError) as exc:
                logger.warning("Skipping unreadable section on page %s: %s", self.page_id, exc)

        self._sections = _renumber(loaded)
        self.selected_section_id = None
        self._revision += 1
        self.is_dirty = False

    def select(self, section_id: Optional[str]) -> None:
        """Select a section, or clear the selection with ``None``. Unknown ids are ignored."""
        if section_id is None or self.get(section_id) is not None:
            self.selected_section_id = section_id

    def add(self, type: str, initial_config: Optional[Dict[str, Any]] = None) -> Section:
        section = Section(
            id=generate_section_id(),
            type=type,
            position=len(self._sections),
            visible=True,
            config=copy.deepcopy(initial_config) if initial_config else {},
        )
        self._sections.append(section)
        _renumber(self._sections)
        self.selected_section_id = section.id
        self._touch()
        return section

    def remove(self, section_id: str) -> None:
        index = self._index_of(section_id)
        if index < 0:
            return

        del self._sections[index]
        _renumber(self._sections)
        if self.selected_section_id == section_id:
            self.selected_section_id = None
        self._touch()

    def update_config(self, section_id: str, partial_config: Mapping[str, Any]) -> None:
        section = self.get(section_id)
        if section is None:
            return

        section.config = {**section.config, **partial_config}
        self._touch()

    def toggle_visibility(self, section_id: str) -> None:
        section = self.get(section_id)
        if section is None:
            return

        section.visible = not section.visible
        self._touch()

    def move(self, from_index: int, to_index: int) -> None:
        # Out-of-range moves are dropped silently so a stray drag event
        # never interrupts the editor.
        size = len(self._sections)
        if not (0 <= from_index < size and 0 <= to_index < size):
            return

        ordered = sorted(self._sections, key=lambda s: s.position)
        moved = ordered.pop(from_index)
        ordered.insert(to_index, moved)
        self._sections = _renumber(ordered)
        self._touch()

    def duplicate(self, section_id: str) -> Optional[Section]:
        index = self._index_of(section_id)
        if index < 0:
            return None

        source = self._sections[index]
        clone = Section(
            id=generate_section_id(),
            type=source.type,
            position=source.position + 1,
            visible=source.visible,
            config=copy.deepcopy(source.config),
        )
        self._sections.insert(index + 1, clone)
        _renumber(self._sections)
        self.selected_section_id = clone.id
        self._touch()
        return clone

    # -------------------------------------------------
    # Persistence
    # -------------------------------------------------
    def to_payload(self) -> List[Dict[str, Any]]:
        ordered = sorted(self._sections, key=lambda s: s.position)
        return [section.to_dict() for section in ordered]

    def save(self) -> List[Dict[str, Any]]:
        payload = self.to_payload()
        revision = self._revision

        self.is_saving = True
        try:
            self.gateway.save_sections(self.page_id, payload)
        except PersistenceError as exc:
            logger.warning("Saving sections for page %s failed: %s", self.page_id, exc.reason)
            raise
        finally:
            self.is_saving = False

        if revision == self._revision:
            self.is_dirty = False
        logger.info("Saved %d sections for page %s", len(payload), self.page_id)
        return payload
