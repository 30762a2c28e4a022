from __future__ import annotations

import logging
from typing import List, Mapping, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.builder.section import Section
from storefront.domain.invariants.exceptions import PersistenceError
from storefront.extensions import db
from storefront.models.page import Page
from storefront.models.section import Section as SectionRow
from storefront.utils.transaction import transactional

logger = logging.getLogger(__name__)


class SectionGateway(Protocol):
    def load_sections(self, page_id: str) -> List[Section]: ...

    def save_sections(self, page_id: str, sections: Sequence[Mapping]) -> None: ...


def _row_to_section(row: SectionRow) -> Section:
    return Section(
        id=row.id,
        type=row.type,
        position=row.position,
        visible=bool(row.visible),
        config=dict(row.config or {}),
    )


class SqlSectionGateway:
    """
    Stores a page's section list in the ``sections`` table.

    A save replaces the page's whole list in one transaction; the last save
    wins.
    """

    def _get_page(self, page_id: str) -> Page:
        page = db.session.get(Page, page_id)
        if page is None:
            raise PersistenceError(f"Page {page_id} not found")
        return page

    def load_sections(self, page_id: str) -> List[Section]:
        page = self._get_page(page_id)
        rows = sorted(page.sections, key=lambda r: r.position)
        return [_row_to_section(row) for row in rows]

    def save_sections(self, page_id: str, sections: Sequence[Mapping]) -> None:
        page = self._get_page(page_id)
        ordered = sorted(sections, key=lambda s: s["position"])

        try:
            with transactional():
                # Orphaned rows are deleted on flush, freeing their ids for reuse
                page.sections.clear()
                db.session.flush()

                for position, data in enumerate(ordered):
                    row = SectionRow()
                    row.id = data["id"]
                    row.tenant_id = page.tenant_id
                    row.type = data["type"]
                    row.position = position
                    row.visible = bool(data.get("visible", True))
                    row.config = dict(data.get("config") or {})
                    page.sections.append(row)

                page.touch()
        except SQLAlchemyError as exc:
            logger.error("Could not save sections for page %s: %s", page_id, exc)
            raise PersistenceError(f"Could not save sections for page {page_id}") from exc
