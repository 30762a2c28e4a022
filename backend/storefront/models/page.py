from storefront.extensions import db
from .base import BaseModel, TenantMixin

PAGE_KINDS = ("sellpage", "homepage")


class Page(BaseModel, TenantMixin):
    """A sellpage or homepage; its content is the ordered ``sections`` list."""

    __tablename__ = "pages"

    kind = db.Column(db.String(20), nullable=False, default="sellpage")
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="draft", index=True)
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    __table_args__ = (
        db.UniqueConstraint("tenant_id", "slug", name="uq_page_slug_per_tenant"),
    )

    tenant = db.relationship("Tenant", back_populates="pages")
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.position",
        cascade="all, delete-orphan",
    )

    @classmethod
    def find_published(cls, tenant_id, slug):
        return cls.query.filter_by(tenant_id=tenant_id, slug=slug, status="published").first()
