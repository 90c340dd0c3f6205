import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..params import parse_numeric_id
from ..services.qna import format_qna, view_qna

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def qna_detail(request, id):
    """Return a Q&A entry, counting this fetch as one view."""
    qna_id = parse_numeric_id(id)
    if qna_id is None:
        return Response({'error': 'Invalid Q&A ID'}, status=status.HTTP_400_BAD_REQUEST)
    try:
        qna = view_qna(qna_id)
        if qna is None:
            return Response({'error': 'Q&A를 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
        return Response({'qna': format_qna(qna)})
    except Exception as e:
        logger.exception("Q&A %s lookup failed", qna_id)
        return Response({'error': str(e) or 'Q&A 조회에 실패했습니다.'}, status=500)
