from sqlalchemy import Column, Integer, String, Boolean, DateTime
from datetime import datetime

from portfolio.db.engine import Base


class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    website_url = Column(String, nullable=False)
    icon_url = Column(String, nullable=True)

    # One of the SKILL_CATEGORY_LABELS keys, e.g. "frontend"
    category = Column(String, nullable=False, default="other")
    featured = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
