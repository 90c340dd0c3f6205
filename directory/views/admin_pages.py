"""
Administrator pages.  All of them sit behind :func:`admin_required`.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import messages
from django.db.models import Prefetch
from django.shortcuts import redirect, render

from ..actions import create_hospital_action
from ..models import Department, Hospital, HospitalDepartment
from ..permissions import admin_required
from ..services.requests import list_requests, status_counts

logger = logging.getLogger(__name__)


@admin_required
def admin_dashboard_page(request):
    limit = settings.ADMIN_DASHBOARD_RECENT
    hospitals: list[Hospital] = []
    departments: list[Department] = []
    try:
        links = HospitalDepartment.objects.select_related('department')
        hospitals = list(
            Hospital.objects.prefetch_related(Prefetch('hospital_departments', queryset=links))
            .order_by('-created_at', '-id')[:limit]
        )
        departments = list(Department.objects.order_by('-created_at', '-id')[:limit])
    except Exception:
        # the dashboard still renders with empty lists
        logger.exception("dashboard data load failed")
    return render(request, 'directory/admin/dashboard.html', {
        'hospitals': hospitals,
        'departments': departments,
    })


@admin_required
def admin_requests_page(request):
    context = {'requests': [], 'counts': {}, 'error': None}
    try:
        context['requests'] = list(list_requests())
        context['counts'] = status_counts()
    except Exception:
        logger.exception("admin request page load failed")
        context['error'] = '문의 내역을 불러오는데 실패했습니다.'
    return render(request, 'directory/admin/requests.html', context)


@admin_required
def admin_new_hospital_page(request):
    """Hospital registration form bound to :func:`create_hospital_action`."""
    if request.method == 'POST':
        result = create_hospital_action(request.POST)
        if result.ok:
            messages.success(request, f'저장 완료! ({result.hospital.name})')
            return redirect('admin_new_hospital_page')
        return render(request, 'directory/admin/hospital_new.html', {
            'form': request.POST.dict(),
            'errors': result.messages(),
        }, status=400)
    return render(request, 'directory/admin/hospital_new.html', {'form': {}, 'errors': []})
