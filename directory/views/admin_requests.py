"""
Administrative view of visit/contact requests.

Lists every request with its hospital and lets staff move a request
through ``new → contacted → completed`` (or ``cancelled``).
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..params import parse_numeric_id
from ..permissions import check_admin
from ..serializers.request import RequestStatusSerializer
from ..services.requests import format_request, get_request, list_requests, update_request_status

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def admin_requests(request):
    """Return all requests, newest first."""
    verdict = check_admin(request.user)
    if not verdict.authorized:
        return Response({'error': verdict.error}, status=verdict.status)
    try:
        data = [format_request(r) for r in list_requests()]
    except Exception as e:
        logger.exception("request listing failed")
        return Response({'error': str(e) or '문의 내역 조회에 실패했습니다.'}, status=500)
    return Response({'requests': data})


@api_view(['GET', 'PATCH'])
@permission_classes([AllowAny])
def admin_request_detail(request, id):
    verdict = check_admin(request.user)
    if not verdict.authorized:
        return Response({'error': verdict.error}, status=verdict.status)
    request_id = parse_numeric_id(id)
    if request_id is None:
        return Response({'error': 'Invalid request id'}, status=status.HTTP_400_BAD_REQUEST)

    if request.method == 'GET':
        try:
            obj = get_request(request_id)
        except Exception as e:
            logger.exception("request %s lookup failed", request_id)
            return Response({'error': str(e) or '문의 조회에 실패했습니다.'}, status=500)
        if not obj:
            return Response({'error': '문의를 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
        return Response({'request': format_request(obj)})

    s = RequestStatusSerializer(data=request.data)
    if not s.is_valid():
        choices = ', '.join(s.fields['status'].choices)
        return Response(
            {'error': f'Invalid status. Must be one of: {choices}'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    try:
        obj = update_request_status(request_id, s.validated_data['status'])
    except Exception as e:
        logger.exception("request %s status update failed", request_id)
        return Response({'error': str(e) or '문의 상태 업데이트에 실패했습니다.'}, status=500)
    if not obj:
        return Response({'error': '문의를 찾을 수 없습니다.'}, status=status.HTTP_404_NOT_FOUND)
    logger.info("request %s marked %s", request_id, obj.status)
    return Response({'success': True, 'request': format_request(obj)})
