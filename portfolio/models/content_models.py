# portfolio/models/content_models.py

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    String,
    Boolean,
    DateTime,
    Text,
    JSON,
)

from portfolio.db.engine import Base


class Blog(Base):
    """
    A blog post.

    Only rows with published=True are ever returned on public endpoints.
    `category_slug` is filled at write time from `category` so category
    routes can match on it directly.
    """
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)

    # Public slug, e.g. "building-a-portfolio-with-fastapi"
    slug = Column(String, unique=True, index=True, nullable=False)

    author = Column(String, nullable=False, default="")
    excerpt = Column(Text, nullable=True)
    content = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    featured_image = Column(String, nullable=True)

    # Free-text label ("Web Development") and its derived slug ("web-development")
    category = Column(String, nullable=True, index=True)
    category_slug = Column(String, nullable=True, index=True)

    # Stored for the frontend's <head>; never interpreted here
    meta_description = Column(String, nullable=True)
    keywords = Column(JSON, nullable=True)

    # Publication flags
    published = Column(Boolean, default=False, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class Project(Base):
    """
    A portfolio project. Same publication rules as Blog.
    """
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=True)

    # e.g. ["FastAPI", "PostgreSQL"]
    technologies = Column(JSON, nullable=False, default=list)

    category = Column(String, nullable=True, index=True)
    category_slug = Column(String, nullable=True, index=True)

    featured_image = Column(String, nullable=True)
    github_url = Column(String, nullable=True)
    live_url = Column(String, nullable=True)

    published = Column(Boolean, default=False, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )
