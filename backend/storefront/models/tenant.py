from storefront.extensions import db
from .base import BaseModel

class Tenant(BaseModel):
    """A merchant store, addressed by ``slug`` on the platform."""

    __tablename__ = "tenants"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    is_active = db.Column(db.Boolean, default=True)

    # Page served at "/" on the store's custom domain
    primary_page_slug = db.Column(db.String(200), nullable=True)

    pages = db.relationship("Page", back_populates="tenant", cascade="all, delete-orphan")
    domains = db.relationship("DomainMapping", back_populates="tenant", cascade="all, delete-orphan")
