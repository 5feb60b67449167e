"""Issue use cases."""

from .common import IssueDecorator, IssueDetail, IssueInfo
from .create_issue import CreateIssueRequest, CreateIssueResponse, CreateIssueUseCase
from .delete_issue import DeleteIssueRequest, DeleteIssueResponse, DeleteIssueUseCase
from .get_issue import GetIssueRequest, GetIssueResponse, GetIssueUseCase
from .list_issues import ListIssuesRequest, ListIssuesResponse, ListIssuesUseCase
from .list_my_issues import (
    ListMyIssuesRequest,
    ListMyIssuesResponse,
    ListMyIssuesUseCase,
)
from .update_issue import UpdateIssueRequest, UpdateIssueResponse, UpdateIssueUseCase
from .update_status import (
    UpdateStatusRequest,
    UpdateStatusResponse,
    UpdateStatusUseCase,
)

__all__ = [
    "CreateIssueRequest",
    "CreateIssueResponse",
    "CreateIssueUseCase",
    "DeleteIssueRequest",
    "DeleteIssueResponse",
    "DeleteIssueUseCase",
    "GetIssueRequest",
    "GetIssueResponse",
    "GetIssueUseCase",
    "IssueDecorator",
    "IssueDetail",
    "IssueInfo",
    "ListIssuesRequest",
    "ListIssuesResponse",
    "ListIssuesUseCase",
    "ListMyIssuesRequest",
    "ListMyIssuesResponse",
    "ListMyIssuesUseCase",
    "UpdateIssueRequest",
    "UpdateIssueResponse",
    "UpdateIssueUseCase",
    "UpdateStatusRequest",
    "UpdateStatusResponse",
    "UpdateStatusUseCase",
]
