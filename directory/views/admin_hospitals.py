import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..permissions import check_admin
from ..services.hospitals import REQUIRED_FIELDS_MESSAGE, create_hospital, format_hospital

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def admin_create_hospital(request):
    """JSON counterpart of the "new hospital" admin form.

    Shares the form's rule: ``name`` and ``address`` are required and a
    blank ``phone`` is stored as null.
    """
    verdict = check_admin(request.user)
    if not verdict.authorized:
        return Response({'error': verdict.error}, status=verdict.status)
    try:
        data = request.data
        result = create_hospital(
            name=data.get('name'),
            address=data.get('address'),
            phone=data.get('phone'),
        )
    except Exception:
        logger.exception("hospital creation failed")
        return Response({'success': False, 'message': '저장 중 오류 발생'}, status=500)
    if not result.ok:
        return Response(
            {
                'success': False,
                'message': REQUIRED_FIELDS_MESSAGE,
                'errors': [e.value for e in result.errors],
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
    return Response({'success': True, 'hospital': format_hospital(result.hospital)})
