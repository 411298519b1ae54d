from sqlalchemy import Boolean, Column, Integer, String, Text
from ..core.database import Base


class Task(Base):
    """Task model for database"""
    __tablename__ = "tasks"
    # Ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, default=False, nullable=False)

    def to_dict(self) -> dict:
        """Convert task to dictionary"""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": bool(self.completed),
        }

    def copy(self) -> "Task":
        """Detached copy carrying the same field values"""
        return Task(**self.to_dict())

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
