from typing import Optional

from django.db import transaction
from django.db.models import F

from directory.models import QnA


def view_qna(qna_id: int) -> Optional[QnA]:
    """Count one view of a question and return it, or ``None`` if it does not exist.

    The conditional increment and the read share a transaction; the
    updated row stays locked until commit so a concurrent delete cannot
    slip in between them.
    """
    with transaction.atomic():
        updated = QnA.objects.filter(id=qna_id).update(view_count=F('view_count') + 1)
        if not updated:
            return None
        return QnA.objects.select_related('user').get(id=qna_id)


def format_qna(qna: QnA) -> dict:
    user = qna.user
    return {
        'id': qna.id,
        'title': qna.title,
        'content': qna.content,
        'viewCount': qna.view_count,
        'userId': qna.user_id,
        'createdAt': qna.created_at.isoformat(),
        'user': {
            'id': user.id,
            'name': user.name or None,
            'image': user.image,
        },
    }
