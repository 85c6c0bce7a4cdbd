"""Task Domain Model -- 按 taskType 判别的联合类型

每种任务类型只携带自身相关字段：
- MANUAL: 仅公共字段
- LEARNING: 视频学习进度
- LOAN: 贷款/EMI 数额（原样存储，不做任何计算）
- MEETING: 会议时间与链接

JSON 字段名为 camelCase（dueDate、subTasks 等），Python 属性为 snake_case。
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .enums import Priority, TaskType


class SubTask(BaseModel):
    """子任务 -- 无独立标识，随父任务整体替换"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    title: str = Field(default="", description="子任务标题")
    completed: bool = Field(default=False, description="是否完成")


class TaskBase(BaseModel):
    """所有任务类型共享的字段"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    id: str | None = Field(default=None, description="唯一标识，ULID 格式，由存储层分配")
    title: str = Field(default="", description="任务标题")
    completed: bool = Field(default=False, description="是否完成")
    due_date: datetime | None = Field(default=None, description="截止时间")
    priority: Priority = Field(default=Priority.NONE, description="优先级")
    description: str | None = Field(default=None, description="任务描述")
    sub_tasks: list[SubTask] = Field(default_factory=list, description="子任务列表")

    @model_validator(mode="before")
    @classmethod
    def _drop_null_foreign_fields(cls, data: Any) -> Any:
        """丢弃值为 null 的其他类型专属字段

        客户端总是提交完整的扁平字段集，不相关字段置为 null；
        非 null 的跨类型字段仍由 extra="forbid" 拒绝。
        """
        if not isinstance(data, dict):
            return data
        own_keys = _field_keys(cls)
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in _VARIANT_KEYS and key not in own_keys)
        }


class ManualTask(TaskBase):
    """普通手动任务"""

    task_type: Literal["MANUAL"] = "MANUAL"

    @field_validator("task_type", mode="before")
    @classmethod
    def _null_means_manual(cls, value: Any) -> Any:
        # 客户端显式传 "taskType": null 时按 MANUAL 处理
        return TaskType.MANUAL.value if value is None else value


class LearningTask(TaskBase):
    """学习目标任务 -- 记录视频进度"""

    task_type: Literal["LEARNING"] = "LEARNING"
    total_videos: int | None = Field(default=None, description="视频总数")
    completed_videos: int | None = Field(default=None, description="已完成视频数")


class LoanTask(TaskBase):
    """贷款/EMI 任务 -- 各数额之间没有计算关系"""

    task_type: Literal["LOAN"] = "LOAN"
    loan_amount: float | None = Field(default=None, description="贷款总额")
    loan_outstanding: float | None = Field(default=None, description="未还余额")
    loan_interest_rate: float | None = Field(default=None, description="年利率")
    loan_emi: float | None = Field(default=None, description="每期还款额")


class MeetingTask(TaskBase):
    """会议任务"""

    task_type: Literal["MEETING"] = "MEETING"
    meeting_start_time: datetime | None = Field(default=None, description="开始时间")
    meeting_end_time: datetime | None = Field(default=None, description="结束时间")
    meeting_info: str | None = Field(default=None, description="会议说明")
    meeting_link: str | None = Field(default=None, description="会议链接")


def _field_keys(model: type[BaseModel]) -> set[str]:
    """模型字段的属性名与 camelCase 别名"""
    keys = set(model.model_fields)
    keys.update(f.alias for f in model.model_fields.values() if f.alias)
    return keys


# 各变体专属字段（不含公共字段与 taskType）
_VARIANT_KEYS: set[str] = set().union(
    *(_field_keys(variant) for variant in (LearningTask, LoanTask, MeetingTask))
) - _field_keys(ManualTask)


def _task_type_of(value: Any) -> str:
    """从原始 dict 或模型实例中取判别值，缺省视为 MANUAL"""
    if isinstance(value, dict):
        raw = value.get("taskType", value.get("task_type"))
    else:
        raw = getattr(value, "task_type", None)
    if raw is None:
        return TaskType.MANUAL.value
    return str(raw)


Task = Annotated[
    Union[
        Annotated[ManualTask, Tag(TaskType.MANUAL.value)],
        Annotated[LearningTask, Tag(TaskType.LEARNING.value)],
        Annotated[LoanTask, Tag(TaskType.LOAN.value)],
        Annotated[MeetingTask, Tag(TaskType.MEETING.value)],
    ],
    Discriminator(_task_type_of),
]


TaskAdapter: TypeAdapter[Task] = TypeAdapter(Task)


def parse_task(data: dict[str, Any]) -> Task:
    """将 JSON dict 校验为具体的 Task 变体

    Raises:
        pydantic.ValidationError: 未知 taskType、跨类型字段或类型不匹配
    """
    return TaskAdapter.validate_python(data)


def dump_task(task: TaskBase) -> dict[str, Any]:
    """序列化为 camelCase JSON dict（枚举输出符号名，时间为 ISO-8601）"""
    return task.model_dump(mode="json", by_alias=True)
