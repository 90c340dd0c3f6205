import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..params import parse_numeric_id
from ..services.reviews import format_review, list_user_reviews

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def user_reviews(request, id):
    """List a user's reviews, newest first."""
    user_id = parse_numeric_id(id)
    if user_id is None:
        return Response({'error': 'Invalid user id'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        reviews = [format_review(r) for r in list_user_reviews(user_id)]
        return Response({'reviews': reviews})
    except Exception as e:
        logger.exception("review listing for user %s failed", user_id)
        return Response({'error': str(e) or '리뷰 조회에 실패했습니다.'}, status=500)
