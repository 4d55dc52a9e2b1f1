"""ORM model for blog posts."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, JSONType, TimestampMixin


class BlogPost(TimestampMixin, Base):
    """
    Blog article. author is a {name, role} object; date is an ISO date string
    as displayed on the site. Only status 'published' is listed publicly.
    """

    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=False)
    author = Column(JSONType, nullable=False)
    date = Column(String(10), nullable=False)
    read_time = Column(String(32), nullable=False)
    featured_image = Column(String(2048), nullable=True)
    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    status = Column(String(16), nullable=False, default="draft")
    views = Column(Integer, nullable=False, default=0)
    sort_order = Column(Integer, nullable=False, default=0)
