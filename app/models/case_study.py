"""ORM model for client case studies."""

from sqlalchemy import Column, Integer, String, Text

from app.models.base import Base, JSONType, TimestampMixin


class CaseStudy(TimestampMixin, Base):
    """
    Client success story.

    challenges / strategy / execution: lists of strings.
    results: list of {label, before, after, change}.
    testimonial: optional {quote, author, role}.
    """

    __tablename__ = "case_studies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    client = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    industry = Column(String(255), nullable=False)
    logo = Column(String(255), nullable=True)
    traffic_increase = Column(String(32), nullable=False)
    traffic_growth = Column(String(32), nullable=True)
    traffic_before = Column(String(32), nullable=True)
    traffic_after = Column(String(32), nullable=True)
    links_built = Column(Integer, nullable=False, default=0)
    dr_before = Column(Integer, nullable=True)
    dr_after = Column(Integer, nullable=True)
    keywords_top10 = Column(Integer, nullable=True)
    duration = Column(String(64), nullable=True)
    featured_image = Column(String(2048), nullable=True)
    overview = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    challenges = Column(JSONType, nullable=False, default=list)
    strategy = Column(JSONType, nullable=False, default=list)
    execution = Column(JSONType, nullable=False, default=list)
    results = Column(JSONType, nullable=False, default=list)
    testimonial = Column(JSONType, nullable=True)
    status = Column(String(16), nullable=False, default="published")
    sort_order = Column(Integer, nullable=False, default=0)
