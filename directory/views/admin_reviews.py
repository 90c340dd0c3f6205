import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import Review
from ..params import parse_numeric_id
from ..permissions import check_admin
from ..services.reviews import format_review, reverify_all_reviews, set_review_verified

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def reverify_reviews(request):
    """Re-run automatic verification over every review (administrators only)."""
    verdict = check_admin(request.user)
    if not verdict.authorized:
        return Response({'error': verdict.error}, status=verdict.status)
    try:
        result = reverify_all_reviews()
    except Exception as e:
        logger.exception("review reverification failed")
        return Response({'error': str(e) or '재검증 중 오류가 발생했습니다.'}, status=500)
    return Response({
        'success': True,
        'message': '모든 리뷰가 재검증되었습니다.',
        'result': result,
    })


@api_view(['PATCH'])
@permission_classes([AllowAny])
def verify_review(request, id):
    """Set one review's ``isVerified`` flag by hand (administrators only)."""
    verdict = check_admin(request.user)
    if not verdict.authorized:
        return Response({'error': verdict.error}, status=verdict.status)
    review_id = parse_numeric_id(id)
    if review_id is None:
        return Response({'error': '유효하지 않은 리뷰 ID입니다.'}, status=status.HTTP_400_BAD_REQUEST)
    is_verified = request.data.get('isVerified') if hasattr(request.data, 'get') else None
    if not isinstance(is_verified, bool):
        return Response({'error': 'isVerified는 boolean 값이어야 합니다.'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        review = set_review_verified(review_id, is_verified)
    except Review.DoesNotExist:
        return Response({'error': '리뷰를 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        logger.exception("review %s verification update failed", review_id)
        return Response({'error': str(e) or '처리 중 오류가 발생했습니다.'}, status=500)
    return Response({
        'success': True,
        'message': '리뷰가 검증되었습니다.' if is_verified else '리뷰 검증이 취소되었습니다.',
        'review': format_review(review),
    })
