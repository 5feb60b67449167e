"""Issue routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import (
    APIRouter,
    File,
    Form,
    Header,
    HTTPException,
    Query,
    Request,
    UploadFile,
    status,
)
from pydantic import BaseModel
from starlette.datastructures import FormData

from civicsync.application.usecase.issue import (
    CreateIssueRequest,
    CreateIssueResponse,
    CreateIssueUseCase,
    DeleteIssueRequest,
    DeleteIssueResponse,
    DeleteIssueUseCase,
    GetIssueRequest,
    GetIssueResponse,
    GetIssueUseCase,
    ListIssuesRequest,
    ListIssuesResponse,
    ListIssuesUseCase,
    ListMyIssuesRequest,
    ListMyIssuesResponse,
    ListMyIssuesUseCase,
    UpdateIssueRequest,
    UpdateIssueResponse,
    UpdateIssueUseCase,
    UpdateStatusRequest,
    UpdateStatusResponse,
    UpdateStatusUseCase,
)
from civicsync.domain.error import (
    IssueLockedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from civicsync.domain.service import JWTService
from civicsync.domain.value import ImageUpload, IssueSortOrder
from civicsync.interface.api.security import authenticate

router = APIRouter(prefix="/api/issues", tags=["issues"], route_class=DishkaRoute)

ISSUE_NOT_FOUND = "Issue not found"


def parse_issue_id(issue_id: str) -> UUID:
    """Parse a path ID; anything that isn't a UUID names no issue."""
    try:
        return UUID(issue_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ISSUE_NOT_FOUND)


async def read_image(image: UploadFile | None) -> ImageUpload | None:
    """Read an optional multipart image part."""
    # Browsers send an empty, unnamed part when no file was chosen
    if image is None or not image.filename:
        return None
    content = await image.read()
    return ImageUpload(
        filename=image.filename,
        content_type=image.content_type or "application/octet-stream",
        content=content,
    )


def submitted_text(form: FormData, name: str) -> str | None:
    """Raw text of a form field, '' if sent blank, None if not sent."""
    value = form.get(name)
    return value if isinstance(value, str) else None


def _mutation_error(e: Exception, action: str) -> HTTPException:
    """Map a failed edit/delete precondition to its HTTP error."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ISSUE_NOT_FOUND)
    if isinstance(e, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You can only {action} your own issues",
        )
    if isinstance(e, IssueLockedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You can only {action} pending issues",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", response_model=CreateIssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(
    create_issue_use_case: FromDishka[CreateIssueUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    category: str | None = Form(default=None),
    location: str | None = Form(default=None),
    latitude: float | None = Form(default=None),
    longitude: float | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> CreateIssueResponse:
    """Report a new issue (multipart form, optional ``image`` file).

    Raises:
        HTTPException: If not authenticated, fields are missing or invalid,
            or the image is rejected
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await create_issue_use_case.execute(
            CreateIssueRequest(
                user_id=payload.user_id,
                title=title,
                description=description,
                category=category,
                location=location,
                latitude=latitude,
                longitude=longitude,
                image=await read_image(image),
            )
        )
    except ValidationError as e:
        logfire.warn("Issue creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=ListIssuesResponse)
async def list_issues(
    list_issues_use_case: FromDishka[ListIssuesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1),
    category: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    search: str | None = None,
    sort_by: str = Query(default=IssueSortOrder.NEWEST.value, alias="sortBy"),
) -> ListIssuesResponse:
    """Browse the issue feed.

    Args:
        page: 1-based page number
        limit: Page size
        category: Category name or "all"
        status_filter: Status name or "all"
        search: Case-insensitive title substring
        sort_by: "newest" or "most-voted"
    """
    payload = authenticate(jwt_service, authorization)

    return await list_issues_use_case.execute(
        ListIssuesRequest(
            user_id=payload.user_id,
            page=page,
            limit=limit,
            category=category,
            status=status_filter,
            search=search,
            sort_by=sort_by,
        )
    )


# Registered before /{issue_id} so "my" isn't taken for an ID
@router.get("/my", response_model=ListMyIssuesResponse)
async def list_my_issues(
    list_my_issues_use_case: FromDishka[ListMyIssuesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListMyIssuesResponse:
    """Issues reported by the authenticated user, newest first."""
    payload = authenticate(jwt_service, authorization)
    return await list_my_issues_use_case.execute(
        ListMyIssuesRequest(user_id=payload.user_id)
    )


@router.get("/{issue_id}", response_model=GetIssueResponse)
async def get_issue(
    issue_id: str,
    get_issue_use_case: FromDishka[GetIssueUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetIssueResponse:
    """Get one issue.

    Raises:
        HTTPException: If not authenticated or the issue doesn't exist
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await get_issue_use_case.execute(
            GetIssueRequest(
                issue_id=str(parse_issue_id(issue_id)), user_id=payload.user_id
            )
        )
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ISSUE_NOT_FOUND)


@router.put("/{issue_id}", response_model=UpdateIssueResponse)
async def update_issue(
    issue_id: str,
    http_request: Request,
    update_issue_use_case: FromDishka[UpdateIssueUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    title: str | None = Form(default=None),
    description: str | None = Form(default=None),
    category: str | None = Form(default=None),
    location: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
) -> UpdateIssueResponse:
    """Edit an issue (multipart form). Only the owner, only while Pending.

    Omitted fields are left unchanged; an empty latitude or longitude
    clears it. Coordinates are read from the raw form because FastAPI turns
    an empty form value into the parameter default.

    Raises:
        HTTPException: 404 if missing, 403 if not the owner or not Pending,
            400 if a coordinate isn't a number or the image is rejected
    """
    payload = authenticate(jwt_service, authorization)
    form = await http_request.form()

    try:
        return await update_issue_use_case.execute(
            UpdateIssueRequest(
                issue_id=str(parse_issue_id(issue_id)),
                user_id=payload.user_id,
                title=title,
                description=description,
                category=category,
                location=location,
                latitude=submitted_text(form, "latitude"),
                longitude=submitted_text(form, "longitude"),
                image=await read_image(image),
            )
        )
    except (NotFoundError, NotAuthorizedError, IssueLockedError, ValidationError) as e:
        raise _mutation_error(e, "edit")


@router.delete("/{issue_id}", response_model=DeleteIssueResponse)
async def delete_issue(
    issue_id: str,
    delete_issue_use_case: FromDishka[DeleteIssueUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteIssueResponse:
    """Delete an issue with its votes and image. Only the owner, only while Pending.

    Raises:
        HTTPException: 404 if missing, 403 if not the owner or not Pending
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await delete_issue_use_case.execute(
            DeleteIssueRequest(
                issue_id=str(parse_issue_id(issue_id)), user_id=payload.user_id
            )
        )
    except (NotFoundError, NotAuthorizedError, IssueLockedError) as e:
        raise _mutation_error(e, "delete")


class UpdateStatusAPIRequest(BaseModel):
    """API request for changing an issue's status."""

    status: str | None = None


@router.patch("/{issue_id}/status", response_model=UpdateStatusResponse)
async def update_status(
    issue_id: str,
    request: UpdateStatusAPIRequest,
    update_status_use_case: FromDishka[UpdateStatusUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateStatusResponse:
    """Set an issue's status. Open to any authenticated user.

    Raises:
        HTTPException: 400 for a status outside the set, 404 if missing
    """
    payload = authenticate(jwt_service, authorization)

    try:
        return await update_status_use_case.execute(
            UpdateStatusRequest(
                issue_id=str(parse_issue_id(issue_id)),
                user_id=payload.user_id,
                status=request.status,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ISSUE_NOT_FOUND)
