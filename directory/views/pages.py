"""
Public server-rendered pages: hospital search, hospital detail with the
request form, and the Q&A detail page.
"""
from __future__ import annotations

import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render

from ..actions import create_request_action
from ..models import Request
from ..params import parse_numeric_id
from ..services.hospitals import get_hospital_with_departments, search_hospitals
from ..services.qna import view_qna

logger = logging.getLogger(__name__)


def hospital_list_page(request):
    q = request.GET.get('q', '')
    return render(request, 'directory/hospitals/list.html', {
        'q': q,
        'hospitals': search_hospitals(q),
    })


def hospital_detail_page(request, id):
    """Hospital page.  ``POST`` submits the visit/contact request form."""
    hospital_id = parse_numeric_id(id)
    hospital = get_hospital_with_departments(hospital_id) if hospital_id is not None else None
    if hospital is None:
        raise Http404('hospital not found')

    context = {
        'hospital': hospital,
        'request_types': Request.TYPE_CHOICES,
        'form': {},
        'form_result': None,
    }
    if request.method == 'POST':
        result = create_request_action(hospital.id, request.POST)
        if result.ok:
            messages.success(request, result.message)
            return redirect('hospital_detail_page', id=hospital.id)
        context['form'] = request.POST.dict()
        context['form_result'] = result
        return render(request, 'directory/hospitals/detail.html', context, status=400)
    return render(request, 'directory/hospitals/detail.html', context)


def qna_detail_page(request, id):
    qna_id = parse_numeric_id(id)
    qna = view_qna(qna_id) if qna_id is not None else None
    if qna is None:
        raise Http404('Q&A not found')
    return render(request, 'directory/qna/detail.html', {'qna': qna})
