"""
Dorm Entity

A dormitory building that groups rooms and is run by one or more managers.
"""

from datetime import UTC, datetime
from typing import List, Optional

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from occupeye.domain.base import generate_uuid
from .enums import DormStatus


class Dorm(SQLModel, table=True):
    __tablename__ = "dorms"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(index=True, max_length=255)
    description: str = Field(default="")
    location: str = Field(default="", max_length=255)
    capacity: int = Field(default=0)
    status: DormStatus = Field(default=DormStatus.active)
    sex: Optional[str] = Field(default=None, max_length=16)  # Male, Female, Mixed
    manager_ids: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
