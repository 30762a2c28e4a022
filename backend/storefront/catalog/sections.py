"""
Section types offered by the builder.

The builder core treats ``type`` as an opaque tag; this catalog only feeds
the add-section picker and the API's per-page-kind checks.
"""
import copy
from typing import Any, Dict, List, Optional

SELLPAGE = "sellpage"
HOMEPAGE = "homepage"
BOTH = "both"

SECTION_META: List[Dict[str, str]] = [
    {
        "type": "announcement-bar",
        "label": "Announcement Bar",
        "icon": "megaphone",
        "description": "Top banner for promotions or announcements",
        "category": SELLPAGE,
    },
    {
        "type": "hero",
        "label": "Hero",
        "icon": "layout",
        "description": "Large header with headline, image, and CTA",
        "category": BOTH,
    },
    {
        "type": "problem",
        "label": "Problem",
        "icon": "alert-circle",
        "description": "Highlight the pain points your product solves",
        "category": SELLPAGE,
    },
    {
        "type": "solution",
        "label": "Solution",
        "icon": "lightbulb",
        "description": "Show how your product solves the problem",
        "category": SELLPAGE,
    },
    {
        "type": "features",
        "label": "Features",
        "icon": "grid",
        "description": "Showcase key product features in a grid",
        "category": SELLPAGE,
    },
    {
        "type": "social-proof",
        "label": "Social Proof",
        "icon": "users",
        "description": "Customer reviews and testimonials",
        "category": SELLPAGE,
    },
    {
        "type": "pricing",
        "label": "Pricing",
        "icon": "tag",
        "description": "Product pricing with discount display",
        "category": SELLPAGE,
    },
    {
        "type": "faq",
        "label": "FAQ",
        "icon": "help-circle",
        "description": "Frequently asked questions accordion",
        "category": SELLPAGE,
    },
    {
        "type": "sticky-cta",
        "label": "Sticky CTA",
        "icon": "arrow-up",
        "description": "Fixed call-to-action bar at page bottom",
        "category": SELLPAGE,
    },
    {
        "type": "countdown-timer",
        "label": "Countdown Timer",
        "icon": "clock",
        "description": "Urgency timer for limited-time offers",
        "category": SELLPAGE,
    },
    {
        "type": "featured-product",
        "label": "Featured Product",
        "icon": "package",
        "description": "Grid of products from the store",
        "category": HOMEPAGE,
    },
    {
        "type": "reviews",
        "label": "Reviews",
        "icon": "star",
        "description": "Store-wide customer reviews",
        "category": HOMEPAGE,
    },
    {
        "type": "guarantee",
        "label": "Guarantee",
        "icon": "shield",
        "description": "Trust badges and guarantees",
        "category": HOMEPAGE,
    },
    {
        "type": "footer",
        "label": "Footer",
        "icon": "align-bottom",
        "description": "Links and copyright notice",
        "category": HOMEPAGE,
    },
]

SECTION_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "announcement-bar": {
        "text": "FREE SHIPPING ON ALL ORDERS!",
        "backgroundColor": "#FF6B6B",
        "textColor": "#FFFFFF",
    },
    "hero": {
        "headline": "Your Product Name",
        "subheadline": "A compelling description of your product",
        "showPrice": True,
        "showComparePrice": True,
    },
    "problem": {
        "title": "The Problem",
        "description": "Describe the problem your product solves",
        "items": [],
    },
    "solution": {
        "title": "The Solution",
        "description": "Explain how your product solves the problem",
        "items": [],
    },
    "features": {
        "title": "Key Features",
        "columns": 3,
        "features": [
            {"icon": "zap", "title": "Feature 1", "description": "Description of feature 1"},
            {"icon": "shield", "title": "Feature 2", "description": "Description of feature 2"},
            {"icon": "star", "title": "Feature 3", "description": "Description of feature 3"},
        ],
    },
    "social-proof": {
        "title": "What Our Customers Say",
        "averageRating": 4.8,
        "reviewCount": 500,
        "reviews": [
            {"name": "Customer Name", "rating": 5, "text": "Amazing product!", "verified": True},
        ],
    },
    "pricing": {
        "title": "Special Offer",
        "showComparePrice": True,
        "showDiscount": True,
        "ctaText": "Buy Now",
    },
    "faq": {
        "title": "Frequently Asked Questions",
        "items": [
            {"question": "What is the return policy?", "answer": "30-day money-back guarantee."},
        ],
    },
    "sticky-cta": {
        "text": "Add to Cart",
        "backgroundColor": "#2563EB",
        "textColor": "#FFFFFF",
    },
    "countdown-timer": {
        "title": "Limited Time Offer",
        "backgroundColor": "#1F2937",
        "textColor": "#FFFFFF",
    },
    "featured-product": {
        "title": "Featured Products",
        "maxProducts": 4,
    },
    "reviews": {
        "title": "Customer Reviews",
        "reviews": [
            {"name": "Happy Customer", "rating": 5, "text": "Great experience!", "verified": True},
        ],
    },
    "guarantee": {
        "title": "Our Guarantee",
        "items": [
            {"icon": "shield", "title": "30-Day Money Back", "description": "No questions asked"},
            {"icon": "truck", "title": "Free Shipping", "description": "On all orders"},
            {"icon": "headphones", "title": "24/7 Support", "description": "We're here to help"},
        ],
    },
    "footer": {
        "copyright": "© Your Store. All rights reserved.",
        "links": [],
    },
}


def section_types_for(page_kind: Optional[str] = None) -> List[Dict[str, str]]:
    if page_kind is None:
        return list(SECTION_META)
    return [m for m in SECTION_META if m["category"] in (page_kind, BOTH)]


def allowed_section_types(page_kind: str) -> set:
    return {m["type"] for m in section_types_for(page_kind)}


def default_config(section_type: str) -> Dict[str, Any]:
    return copy.deepcopy(SECTION_DEFAULTS.get(section_type, {}))
