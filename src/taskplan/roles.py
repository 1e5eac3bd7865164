"""Keyword-based role filtering and role display labels."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from .logger import get_logger
from .models import CandidateTask, Role

logger = get_logger()

DEFAULT_ROLE_KEYWORDS: dict[Role, list[str]] = {
    Role.FRONTEND: [
        "UI",
        "界面",
        "页面",
        "组件",
        "样式",
        "前端",
        "交互",
        "动画",
        "响应式",
        "frontend",
        "page",
        "component",
    ],
    Role.BACKEND: [
        "API",
        "接口",
        "数据库",
        "后端",
        "服务",
        "认证",
        "权限",
        "中间件",
        "缓存",
        "backend",
        "database",
        "service",
    ],
    Role.TEST: ["测试", "用例", "自动化", "单元测试", "集成测试", "E2E", "test"],
}

DEFAULT_ROLE_LABELS: dict[Role, str] = {
    Role.FRONTEND: "前端开发",
    Role.BACKEND: "后端开发",
    Role.TEST: "测试工程师",
}


def filter_tasks_by_role(
    tasks: Iterable[CandidateTask],
    role: Role,
    keywords: Mapping[Role, Sequence[str]] | None = None,
) -> list[CandidateTask]:
    """Keep tasks whose title, description or category mentions a role keyword.

    Matching is a plain substring test, so ASCII keywords are case sensitive
    exactly as written.
    """
    role_keywords = (keywords or DEFAULT_ROLE_KEYWORDS).get(role, [])
    kept: list[CandidateTask] = []
    for task in tasks:
        search_text = f"{task.title} {task.description} {task.category}"
        if any(keyword in search_text for keyword in role_keywords):
            kept.append(task)
        else:
            logger.checks(f"Dropping '{task.title}': no {role.value} keyword")
    return kept


def role_label(role: Role, labels: Mapping[Role, str] | None = None) -> str:
    """Display label for a role, falling back to the role name."""
    return (labels or DEFAULT_ROLE_LABELS).get(role, role.value)
