import pytest
from unittest import mock

from django.urls import reverse

from directory.models import Department, Hospital, HospitalDepartment, QnA, Request, User

pytestmark = pytest.mark.django_db


@pytest.fixture
def hospital():
    h = Hospital.objects.create(name='서울대학교병원', name_en='SNUH', address='서울특별시 종로구 대학로 101')
    dept = Department.objects.create(name='내과', icon='🩺')
    HospitalDepartment.objects.create(hospital=h, department=dept)
    return h


@pytest.fixture
def admin_user():
    return User.objects.create_user(username='boss', password='P@ssw0rd1', role='admin')


@pytest.fixture
def member():
    return User.objects.create_user(username='member', password='P@ssw0rd1', name='김회원')


# -- public pages ------------------------------------------------------------

def test_hospital_list_highlights_query(client, hospital):
    Hospital.objects.create(name='부산대학교병원', address='부산 서구')
    r = client.get(reverse('hospital_list_page'), {'q': '종로'})
    assert r.status_code == 200
    html = r.content.decode()
    assert '<mark class="highlight">종로</mark>' in html
    assert '부산대학교병원' not in html
    assert '🏥' in html


def test_hospital_detail_page(client, hospital):
    r = client.get(reverse('hospital_detail_page', args=[hospital.id]))
    assert r.status_code == 200
    html = r.content.decode()
    assert '서울대학교병원' in html
    assert '내과' in html


@pytest.mark.parametrize('bad', ['abc', '1.5', '999999'])
def test_hospital_detail_page_not_found(client, bad):
    r = client.get(reverse('hospital_detail_page', args=[bad]))
    assert r.status_code == 404


def test_request_form_submission(client, hospital):
    url = reverse('hospital_detail_page', args=[hospital.id])
    r = client.post(url, {'type': 'reservation', 'name': '홍길동', 'phone': '010-0000-0000'}, follow=True)
    assert r.status_code == 200
    assert r.redirect_chain[-1][0] == url
    assert '문의가 접수되었습니다.' in r.content.decode()
    req = Request.objects.get()
    assert req.hospital_id == hospital.id
    assert req.type == 'reservation'


def test_request_form_missing_fields(client, hospital):
    url = reverse('hospital_detail_page', args=[hospital.id])
    r = client.post(url, {'type': 'inquiry', 'name': '홍길동'})
    assert r.status_code == 400
    html = r.content.decode()
    assert '필수값 누락' in html
    assert 'value="홍길동"' in html
    assert Request.objects.count() == 0


def test_qna_page_counts_view(client, member):
    qna = QnA.objects.create(user=member, title='주차 되나요', content='주차 문의')
    r = client.get(reverse('qna_detail_page', args=[qna.id]))
    assert r.status_code == 200
    assert '김회원' in r.content.decode()
    qna.refresh_from_db()
    assert qna.view_count == 1
    assert client.get(reverse('qna_detail_page', args=[qna.id + 1])).status_code == 404


# -- admin pages -------------------------------------------------------------

@pytest.mark.parametrize('name', ['admin_dashboard_page', 'admin_requests_page', 'admin_new_hospital_page'])
def test_admin_pages_require_login(client, name):
    r = client.get(reverse(name))
    assert r.status_code == 401
    assert '인증이 필요합니다.' in r.content.decode()


@pytest.mark.parametrize('name', ['admin_dashboard_page', 'admin_requests_page', 'admin_new_hospital_page'])
def test_admin_pages_reject_members(client, member, name):
    client.force_login(member)
    r = client.get(reverse(name))
    assert r.status_code == 403
    assert '관리자 권한이 필요합니다.' in r.content.decode()


def test_admin_dashboard(client, admin_user, hospital):
    client.force_login(admin_user)
    r = client.get(reverse('admin_dashboard_page'))
    assert r.status_code == 200
    assert '서울대학교병원' in r.content.decode()
    assert [h.id for h in r.context['hospitals']] == [hospital.id]


def test_admin_new_hospital_form(client, admin_user):
    client.force_login(admin_user)
    url = reverse('admin_new_hospital_page')
    r = client.post(url, {'name': '강북삼성병원', 'address': '서울 종로구 새문안로 29', 'phone': ''})
    assert r.status_code == 302
    assert r['Location'] == url
    h = Hospital.objects.get(name='강북삼성병원')
    assert h.phone is None


def test_admin_new_hospital_form_errors(client, admin_user):
    client.force_login(admin_user)
    r = client.post(reverse('admin_new_hospital_page'), {'name': '이름만', 'address': ''})
    assert r.status_code == 400
    assert '주소는 필수입니다.' in r.content.decode()
    assert not Hospital.objects.filter(name='이름만').exists()


def test_admin_requests_page(client, admin_user, hospital):
    Request.objects.create(hospital=hospital, type='inquiry', name='홍길동', phone='010', message='첫줄\n둘째줄')
    client.force_login(admin_user)
    r = client.get(reverse('admin_requests_page'))
    assert r.status_code == 200
    html = r.content.decode()
    assert '홍길동' in html
    assert '첫줄<br>둘째줄' in html
    assert r.context['counts']['total'] == 1


def test_admin_requests_page_load_failure(client, admin_user):
    client.force_login(admin_user)
    with mock.patch('directory.views.admin_pages.list_requests', side_effect=RuntimeError('db')):
        r = client.get(reverse('admin_requests_page'))
    assert r.status_code == 200
    html = r.content.decode()
    assert '문의 내역을 불러오는데 실패했습니다.' in html
    assert '다시 시도' in html
