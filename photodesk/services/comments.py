"""Owner-channel comment operations. Client comments go through services.portal."""

from photodesk.core.errors import ValidationError
from photodesk.schemas.comments import PhotoJobComment, PhotoJobCommentCreate
from photodesk.services.photo_jobs import get_owned_photo_job
from photodesk.storage.base import Storage


def require_content(content: str | None) -> str:
    """Return content unchanged, or raise ValidationError when it is missing or blank."""
    if content is None or not content.strip():
        raise ValidationError("Comment content is required")
    return content


def list_job_comments(store: Storage, job_id: int, caller_user_id: int) -> list[PhotoJobComment]:
    get_owned_photo_job(store, job_id, caller_user_id)
    return store.list_comments_by_job(job_id)


def post_owner_comment(
    store: Storage, job_id: int, content: str, caller_user_id: int
) -> PhotoJobComment:
    """Photographer comment: owner only, no password check, never marked as from the client."""
    get_owned_photo_job(store, job_id, caller_user_id)
    require_content(content)
    return store.create_photo_job_comment(
        PhotoJobCommentCreate(job_id=job_id, content=content, is_from_client=False)
    )
