"""
User model with credit balance.
Credits are simple integers - one image generation = 1 credit.
"""
from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint
from imagegen.models.base import Base, generate_uuid, utcnow


class User(Base):
    """User model with credit-based image generation."""
    
    __tablename__ = "users"
    
    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), nullable=False, unique=True, index=True)  # Stored lower-cased
    password_hash = Column(String(255), nullable=False)
    credits = Column(Integer, nullable=False, default=0)  # Generation credits balance
    
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    
    __table_args__ = (
        CheckConstraint("credits >= 0", name="ck_users_credits_non_negative"),
    )
    
    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, credits={self.credits})>"
