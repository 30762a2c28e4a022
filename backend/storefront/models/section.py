from storefront.extensions import db
from .base import BaseModel, TenantMixin

class Section(BaseModel, TenantMixin):
    __tablename__ = "sections"

    # Ids are minted by the builder and only unique within their page
    id = db.Column(db.String(64), primary_key=True)
    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), primary_key=True)

    type = db.Column(db.String(100), nullable=False)  # hero, pricing, faq
    position = db.Column(db.Integer, nullable=False, default=0)
    visible = db.Column(db.Boolean, nullable=False, default=True)
    config = db.Column(db.JSON, default=dict)

    page = db.relationship("Page", back_populates="sections")

    __table_args__ = (
        db.Index("idx_section_page_position", "page_id", "position"),
    )
