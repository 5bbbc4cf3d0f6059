"""Reservation task models."""

from datetime import datetime
from typing import Literal, TypeAlias

import pydantic

from .common import ApiModel, LinkedObject

TaskTypeName: TypeAlias = Literal[
    "Email",
    "PhoneCall",
    "Post",
    "Meet",
    "System",
    "InternalProcess",
    "Audit",
    "SupplierAgreement",
    "FlightOnRequestTask",
]


class CreateTaskRequest(ApiModel):
    task_type: TaskTypeName
    description: str
    assigned_to_user_id: int | None = pydantic.Field(None, alias="AssignedToUserID")
    assigned_to_user_group_id: int | None = pydantic.Field(
        None, alias="AssignedToUserGroupID"
    )
    action_date: datetime | None = None


class TaskType(ApiModel):
    id: int = pydantic.Field(alias="ID")
    name: str


class Task(LinkedObject):
    id: int = pydantic.Field(alias="ID")
    description: str = ""
    status: str = ""
    task_type: TaskType | None = None
    due_date_time: datetime | None = None
    last_modified_date: datetime | None = None
