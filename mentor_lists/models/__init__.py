"""
核心表 ORM 模型
users / lists / list_mentors
用户由身份提供方同步写入，本服务只读；列表由收藏 Toggle 创建和修改
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    String, Integer, Boolean, DateTime, JSON,
    ForeignKey, Index, UniqueConstraint,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mentor_lists.db.session import Base


# ==================== 枚举类型 ====================

class UserRole(str, enum.Enum):
    MEMBER = "member"
    MENTOR = "mentor"
    ADMIN = "admin"


# ==================== 基础 Mixin ====================

class TimestampMixin:
    """通用时间戳字段"""
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


# ==================== User ====================

class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # external_id: 身份提供方的用户ID (token subject)
    external_id: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    picture: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    # 角色可叠加，如 ["member", "mentor"]
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint("external_id", name="uq_users_external_id"),
    )

    # Relationships
    lists: Mapped[list["MentorList"]] = relationship(back_populates="user")

    @property
    def role_set(self) -> set[UserRole]:
        """roles 列 → UserRole 集合（忽略未知角色）"""
        known = {r.value for r in UserRole}
        return {UserRole(r) for r in (self.roles or []) if r in known}

    def has_role(self, role: UserRole) -> bool:
        return role in self.role_set


# ==================== MentorList ====================

class MentorList(Base, TimestampMixin):
    """用户的导师列表；is_favorite=True 的即收藏列表（每用户至多一个）"""
    __tablename__ = "lists"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("ix_lists_user_favorite", "user_id", "is_favorite"),
    )

    # Relationships
    user: Mapped["User"] = relationship(back_populates="lists")
    mentors: Mapped[list["ListMentor"]] = relationship(
        back_populates="mentor_list",
        order_by="ListMentor.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )


# ==================== ListMentor (列表成员，有序) ====================

class ListMentor(Base):
    """列表中的导师引用，position 保持插入顺序"""
    __tablename__ = "list_mentors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    list_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("lists.id", ondelete="CASCADE"), nullable=False
    )
    mentor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        # 同一列表中同一导师只出现一次
        UniqueConstraint("list_id", "mentor_id", name="uq_list_mentors"),
        Index("ix_list_mentors_list_id", "list_id"),
    )

    # Relationships
    mentor_list: Mapped["MentorList"] = relationship(back_populates="mentors")
    mentor: Mapped["User"] = relationship(foreign_keys=[mentor_id])
