"""Domain Models 单元测试

测试内容：
1. 枚举取值与 Priority 排序
2. taskType 判别：缺省、各变体、未知值
3. 跨类型字段被拒绝
4. JSON 编解码往返
"""

from datetime import UTC, datetime

import pytest
from assistant.core.models import (
    LearningTask,
    LoanTask,
    ManualTask,
    MeetingTask,
    Priority,
    SubTask,
    TaskType,
    dump_task,
    parse_task,
    priority_sort_key,
)
from pydantic import ValidationError


class TestEnums:
    """枚举测试"""

    def test_priority_values(self):
        """Priority 枚举值为符号名"""
        assert Priority.NONE == "NONE"
        assert Priority.HIGH == "HIGH"
        assert Priority("CRITICAL") == Priority.CRITICAL

    def test_priority_is_ordered(self):
        """Priority 按 NONE < LOW < MEDIUM < HIGH < CRITICAL 排序"""
        assert [p.rank for p in Priority] == [0, 1, 2, 3, 4]
        shuffled = [Priority.HIGH, None, Priority.LOW, Priority.CRITICAL]
        ordered = sorted(shuffled, key=priority_sort_key)
        assert ordered == [None, Priority.LOW, Priority.HIGH, Priority.CRITICAL]

    def test_task_type_values(self):
        """TaskType 覆盖四种任务类型"""
        assert {t.value for t in TaskType} == {"MANUAL", "LEARNING", "LOAN", "MEETING"}


class TestDiscriminator:
    """taskType 判别测试"""

    def test_missing_task_type_defaults_to_manual(self):
        """未提供 taskType 时解析为 ManualTask"""
        task = parse_task({"title": "Buy milk", "priority": "LOW"})
        assert isinstance(task, ManualTask)
        assert task.task_type == "MANUAL"
        assert task.completed is False
        assert task.sub_tasks == []
        assert task.priority == Priority.LOW

    def test_null_task_type_defaults_to_manual(self):
        task = parse_task({"title": "x", "taskType": None})
        assert isinstance(task, ManualTask)

    def test_learning_variant(self):
        task = parse_task(
            {"title": "Course", "taskType": "LEARNING", "totalVideos": 40, "completedVideos": 12}
        )
        assert isinstance(task, LearningTask)
        assert task.total_videos == 40
        assert task.completed_videos == 12

    def test_loan_variant_stores_emi_verbatim(self):
        """EMI 不根据本金/利率计算，原样保存"""
        task = parse_task(
            {
                "title": "Car loan",
                "taskType": "LOAN",
                "loanAmount": 500000,
                "loanOutstanding": 320000.5,
                "loanInterestRate": 9.5,
                "loanEmi": 1,
            }
        )
        assert isinstance(task, LoanTask)
        assert task.loan_emi == 1
        assert task.loan_outstanding == 320000.5

    def test_meeting_variant(self):
        task = parse_task(
            {
                "title": "Standup",
                "taskType": "MEETING",
                "meetingStartTime": "2025-03-01T09:00:00Z",
                "meetingEndTime": "2025-03-01T09:15:00Z",
                "meetingLink": "https://meet.example.com/abc",
            }
        )
        assert isinstance(task, MeetingTask)
        assert task.meeting_start_time == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
        assert task.meeting_info is None

    def test_unknown_task_type_rejected(self):
        with pytest.raises(ValidationError):
            parse_task({"title": "x", "taskType": "GROCERY"})

    def test_foreign_fields_rejected(self):
        """MANUAL 任务不能携带贷款字段"""
        with pytest.raises(ValidationError):
            parse_task({"title": "x", "taskType": "MANUAL", "loanAmount": 100})

    def test_null_foreign_fields_dropped(self):
        """扁平字段集中值为 null 的其他类型字段被丢弃"""
        task = parse_task(
            {
                "title": "x",
                "taskType": "LOAN",
                "loanEmi": 1500.0,
                "totalVideos": None,
                "completedVideos": None,
                "meetingStartTime": None,
                "meetingLink": None,
            }
        )
        assert isinstance(task, LoanTask)
        assert task.loan_emi == 1500.0
        assert "totalVideos" not in dump_task(task)

    def test_null_own_fields_kept(self):
        """本类型字段为 null 时保留为 None"""
        task = parse_task({"title": "x", "taskType": "LEARNING", "totalVideos": None})
        assert isinstance(task, LearningTask)
        assert task.total_videos is None

    def test_null_unknown_field_still_rejected(self):
        """只丢弃已知的类型专属字段，未知字段即使为 null 也拒绝"""
        with pytest.raises(ValidationError):
            parse_task({"title": "x", "isCompleted": None})

    def test_learning_rejects_meeting_fields(self):
        with pytest.raises(ValidationError):
            parse_task({"title": "x", "taskType": "LEARNING", "meetingLink": "https://x"})

    def test_invalid_priority_rejected(self):
        with pytest.raises(ValidationError):
            parse_task({"title": "x", "priority": "URGENT"})

    def test_snake_case_names_accepted(self):
        """Python 属性名同样可用于构造"""
        task = LearningTask(title="x", total_videos=3)
        assert task.total_videos == 3

    def test_subtask_ignores_client_id(self):
        """子任务无独立标识，客户端附带的 id 被忽略"""
        task = parse_task({"title": "x", "subTasks": [{"id": "tmp1", "title": "a"}]})
        assert task.sub_tasks == [SubTask(title="a", completed=False)]


class TestCodec:
    """JSON 编解码测试"""

    def test_dump_uses_camel_case(self):
        task = LoanTask(title="Loan", loan_emi=1200.0, due_date=datetime(2025, 1, 1, tzinfo=UTC))
        data = dump_task(task)
        assert data["taskType"] == "LOAN"
        assert data["loanEmi"] == 1200.0
        assert data["dueDate"] == "2025-01-01T00:00:00Z"
        assert data["subTasks"] == []
        assert "loan_emi" not in data

    def test_round_trip_preserves_all_fields(self):
        original = MeetingTask(
            id="01JTESTMEETING000000000001",
            title="Review",
            completed=True,
            due_date=datetime(2025, 5, 2, 17, 30, tzinfo=UTC),
            priority=Priority.HIGH,
            description="quarterly",
            sub_tasks=[SubTask(title="slides", completed=True), SubTask(title="notes")],
            meeting_start_time=datetime(2025, 5, 2, 16, 0, tzinfo=UTC),
            meeting_end_time=datetime(2025, 5, 2, 17, 0, tzinfo=UTC),
            meeting_info="Room 4",
            meeting_link="https://meet.example.com/r",
        )
        restored = parse_task(dump_task(original))
        assert restored == original

    def test_round_trip_empty_subtasks_stay_empty(self):
        data = dump_task(parse_task(dump_task(ManualTask(title="x"))))
        assert data["subTasks"] == []

    def test_round_trip_priority_symbol(self):
        data = dump_task(parse_task({"title": "x", "priority": "HIGH"}))
        assert data["priority"] == "HIGH"
        assert parse_task(data).priority is Priority.HIGH
