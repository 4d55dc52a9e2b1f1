"""
First-use seeding of content collections.

A collection is seeded at most once: the default set is inserted together with
a seed_markers row in the same transaction, so a concurrent first access that
loses the race fails on the marker's primary key and inserts nothing.
"""

import copy
import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import (
    FAQ,
    BlogPost,
    CaseStudy,
    GlobalSettings,
    GuestPostingPackage,
    HomepageSection,
    LinkBuildingPackage,
    LiveChat,
    Navigation,
    PricingPlan,
    SeedMarker,
    Service,
    Testimonial,
    Theme,
)
from app.models.base import Base
from app.services import seed_data

logger = logging.getLogger(__name__)

# Content collections and their default records, in seeding order.
COLLECTIONS: list[tuple[type[Base], list[dict[str, Any]]]] = [
    (BlogPost, seed_data.BLOG_POSTS),
    (CaseStudy, seed_data.CASE_STUDIES),
    (FAQ, seed_data.FAQS),
    (Testimonial, seed_data.TESTIMONIALS),
    (PricingPlan, seed_data.PRICING_PLANS),
    (GuestPostingPackage, seed_data.GUEST_POSTING_PACKAGES),
    (LinkBuildingPackage, seed_data.LINK_BUILDING_PACKAGES),
    (Service, seed_data.SERVICES),
    (HomepageSection, seed_data.HOMEPAGE_SECTIONS),
]

# Singleton collections are seeded with one active default record.
SINGLETONS: list[tuple[type[Base], dict[str, Any]]] = [
    (Theme, seed_data.THEME),
    (Navigation, seed_data.NAVIGATION),
    (LiveChat, seed_data.LIVE_CHAT),
    (GlobalSettings, seed_data.GLOBAL_SETTINGS),
]


def ensure_seeded(db: Session, model: type[Base], defaults: list[dict[str, Any]]) -> bool:
    """
    Insert the default records into an empty, never-seeded collection.

    Returns True if this call inserted the defaults, False if the collection
    already had rows, was seeded before, or another session won the race.
    """
    collection = model.__tablename__
    if db.scalar(select(func.count()).select_from(model)):
        return False
    if db.get(SeedMarker, collection) is not None:
        return False

    db.add(SeedMarker(collection=collection))
    db.add_all(model(**copy.deepcopy(values)) for values in defaults)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Seeding of %s skipped, collection claimed concurrently", collection)
        return False

    logger.info("Seeded %s default records into %s", len(defaults), collection)
    return True


def seed_all(db: Session) -> dict[str, bool]:
    """Seed every content and singleton collection. Returns collection -> inserted."""
    results = {}
    for model, defaults in COLLECTIONS:
        results[model.__tablename__] = ensure_seeded(db, model, defaults)
    for model, values in SINGLETONS:
        results[model.__tablename__] = ensure_seeded(db, model, [{**values, "is_active": True}])
    return results
