from sqlalchemy import Column, Integer, String

from app.core.object_id import new_object_id
from app.db.base import Base


# =========================
# Models
# =========================

class User(Base):
    """
    A user document in the `users` collection.
    Rows are read-only while serving requests; only the seed script writes.
    """
    __tablename__ = "users"

    # 24-char hex, ObjectId-shaped
    id = Column(String(24), primary_key=True, default=new_object_id)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    age = Column(Integer, nullable=True, index=True)
