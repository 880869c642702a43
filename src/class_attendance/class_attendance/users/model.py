from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Thực thể miền (domain): tài khoản sinh viên.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    user_id: int
    full_name: str
    username: str
    password_hash: str
    is_active: bool = True
