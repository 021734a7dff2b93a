"""
收藏权限与 Toggle 规则
- 本人或管理员才能管理某用户的收藏列表
- 导师已在列表中 → 移除；不在 → 追加
"""
import uuid
from typing import Any

from mentor_lists.models import ListMentor, MentorList, User, UserRole


def ids_equal(left: Any, right: Any) -> bool:
    """按值比较两个ID（str / UUID / 其他可转字符串的ID对象）"""
    if left is None or right is None:
        return False
    return str(left) == str(right)


def can_manage_favorites(caller: User, target: User) -> bool:
    """调用方是目标本人，或拥有 ADMIN 角色"""
    return ids_equal(caller.id, target.id) or caller.has_role(UserRole.ADMIN)


def toggle_mentor(mentor_list: MentorList, mentor_id: str) -> bool:
    """翻转导师在列表中的成员关系，返回 True 表示本次为添加"""
    for index, ref in enumerate(mentor_list.mentors):
        if ids_equal(ref.mentor_id, mentor_id):
            mentor_list.mentors.pop(index)
            return False

    mentor_list.mentors.append(ListMentor(id=str(uuid.uuid4()), mentor_id=mentor_id))
    return True
