import pytest
from decimal import Decimal

from directory.actions import create_hospital_action, create_request_action
from directory.models import Hospital, QnA, Request, Review, User
from directory.params import parse_numeric_id
from directory.permissions import check_admin
from directory.services.hospitals import HospitalFieldError, create_hospital, search_hospitals
from directory.services.qna import view_qna
from directory.services.requests import RequestValidationError, create_request, status_counts
from directory.services.reviews import (
    contains_inappropriate_content,
    set_review_verified,
    should_auto_verify,
)

LONG_CONTENT = '의료진이 친절하고 설명도 자세해서 처음 방문했는데도 편하게 진료 받았습니다.'


@pytest.mark.parametrize('value,expected', [
    ('12', 12),
    (' 7 ', 7),
    ('1e2', 100),
    ('3.0', 3),
    (5, 5),
    ('abc', None),
    ('1.5', None),
    ('NaN', None),
    ('Infinity', None),
    ('-inf', None),
    ('', None),
    (None, None),
    (True, None),
    ('1_0', None),
    ('١', None),
    ('１２', None),
    ('0x10', None),
    ('1e400', None),
])
def test_parse_numeric_id(value, expected):
    assert parse_numeric_id(value) == expected


# -- hospitals ---------------------------------------------------------------

@pytest.mark.django_db
def test_create_hospital_stores_blank_phone_as_null():
    result = create_hospital(name=' 세브란스병원 ', address='서울 서대문구 연세로 50-1', phone='  ')
    assert result.ok
    assert result.hospital.name == '세브란스병원'
    assert Hospital.objects.get(id=result.hospital.id).phone is None


@pytest.mark.django_db
def test_create_hospital_reports_every_missing_field():
    result = create_hospital(name='   ', address=None, phone='02-000-0000')
    assert not result.ok
    assert result.hospital is None
    assert result.errors == [HospitalFieldError.NAME_REQUIRED, HospitalFieldError.ADDRESS_REQUIRED]
    assert result.messages() == ['병원명은 필수입니다.', '주소는 필수입니다.']
    assert Hospital.objects.count() == 0


@pytest.mark.django_db
def test_create_hospital_strips_markup():
    result = create_hospital(name='<b>고려대병원</b>', address='서울 성북구')
    assert result.hospital.name == '고려대병원'


@pytest.mark.django_db
def test_create_hospital_action_reads_form_fields():
    result = create_hospital_action({'name': '분당서울대병원', 'address': '경기 성남시', 'phone': '031-787-7114'})
    assert result.ok
    assert result.hospital.phone == '031-787-7114'

    failed = create_hospital_action({'name': '', 'address': '주소'})
    assert failed.errors == [HospitalFieldError.NAME_REQUIRED]


@pytest.mark.django_db
def test_search_hospitals_matches_name_and_address():
    Hospital.objects.create(name='서울아산병원', name_en='Asan Medical Center', address='서울 송파구')
    Hospital.objects.create(name='부산대학교병원', address='부산 서구')
    assert [h.name for h in search_hospitals('asan')] == ['서울아산병원']
    assert [h.name for h in search_hospitals('부산')] == ['부산대학교병원']
    assert search_hospitals('').count() == 2


# -- requests ----------------------------------------------------------------

@pytest.mark.django_db
def test_create_request_requires_type_name_phone():
    hospital = Hospital.objects.create(name='병원', address='주소')
    with pytest.raises(RequestValidationError) as exc:
        create_request(hospital.id, {'name': '홍길동'})
    assert exc.value.message == '필수값 누락'
    assert exc.value.missing_required
    assert {'type', 'phone'} <= set(exc.value.errors)
    assert Request.objects.count() == 0


@pytest.mark.django_db
def test_create_request_unknown_hospital():
    with pytest.raises(Hospital.DoesNotExist):
        create_request(99999, {'type': 'inquiry', 'name': '홍길동', 'phone': '010'})
    assert Request.objects.count() == 0


@pytest.mark.django_db
def test_create_request_date_only_preferred_at():
    hospital = Hospital.objects.create(name='병원', address='주소')
    created = create_request(hospital.id, {
        'type': 'reservation', 'name': '홍길동', 'phone': '010', 'preferredAt': '2025-05-01',
    })
    assert created.preferred_at is not None
    assert created.status == Request.STATUS_NEW


@pytest.mark.django_db
def test_create_request_action_reports_result():
    hospital = Hospital.objects.create(name='병원', address='주소')
    ok = create_request_action(hospital.id, {'type': 'inquiry', 'name': '홍길동', 'phone': '010'})
    assert ok.ok
    assert ok.message == '문의가 접수되었습니다.'

    missing = create_request_action(hospital.id, {'type': 'inquiry'})
    assert not missing.ok
    assert missing.message == '필수값 누락'
    assert 'name' in missing.errors

    unknown = create_request_action(hospital.id + 100, {'type': 'inquiry', 'name': 'a', 'phone': '1'})
    assert not unknown.ok
    assert Request.objects.count() == 1


@pytest.mark.django_db
def test_status_counts():
    hospital = Hospital.objects.create(name='병원', address='주소')
    Request.objects.create(hospital=hospital, type='inquiry', name='a', phone='1')
    Request.objects.create(hospital=hospital, type='inquiry', name='b', phone='2', status='completed')
    counts = status_counts()
    assert counts['new'] == 1
    assert counts['completed'] == 1
    assert counts['contacted'] == 0
    assert counts['total'] == 2


# -- Q&A ---------------------------------------------------------------------

@pytest.mark.django_db
def test_view_qna_counts_each_fetch():
    user = User.objects.create_user(username='asker', password='x')
    qna = QnA.objects.create(user=user, title='질문', content='내용')
    assert view_qna(qna.id).view_count == 1
    assert view_qna(qna.id).view_count == 2


@pytest.mark.django_db
def test_view_qna_missing():
    assert view_qna(12345) is None


# -- reviews -----------------------------------------------------------------

def test_should_auto_verify_rules():
    assert should_auto_verify(user_id=1, content=LONG_CONTENT, title=None, rating=Decimal('4.0'))
    assert not should_auto_verify(user_id=None, content=LONG_CONTENT, title=None, rating=4)
    assert not should_auto_verify(user_id=1, content='짧아요', title=None, rating=4)
    assert not should_auto_verify(user_id=1, content=LONG_CONTENT, title=None, rating=Decimal('0.0'))
    assert not should_auto_verify(user_id=1, content=LONG_CONTENT, title='광고 문의', rating=5)


def test_inappropriate_content_checks_title_too():
    assert contains_inappropriate_content('평범한 내용', '여기 클릭')
    assert not contains_inappropriate_content('평범한 내용', None)


@pytest.mark.django_db
def test_set_review_verified_overrides_flag():
    user = User.objects.create_user(username='writer', password='x')
    hospital = Hospital.objects.create(name='병원', address='주소')
    review = Review.objects.create(user=user, hospital=hospital, content=LONG_CONTENT, rating='4.5')
    assert set_review_verified(review.id, True).is_verified
    review.refresh_from_db()
    assert review.is_verified

    set_review_verified(review.id, False)
    review.refresh_from_db()
    assert not review.is_verified

    with pytest.raises(Review.DoesNotExist):
        set_review_verified(review.id + 1, True)


# -- permissions -------------------------------------------------------------

@pytest.mark.django_db
def test_check_admin_verdicts():
    from django.contrib.auth.models import AnonymousUser

    anon = check_admin(AnonymousUser())
    assert (anon.authorized, anon.status, anon.error) == (False, 401, '인증이 필요합니다.')

    member = User.objects.create_user(username='m', password='x')
    denied = check_admin(member)
    assert (denied.authorized, denied.status, denied.error) == (False, 403, '관리자 권한이 필요합니다.')

    admin = User.objects.create_user(username='a', password='x', role='admin')
    assert check_admin(admin).authorized


# -- management commands -----------------------------------------------------

@pytest.mark.django_db
def test_seed_directory_is_idempotent():
    from django.core.management import call_command
    from directory.models import Department

    call_command('seed_directory')
    call_command('seed_directory')
    assert Department.objects.filter(name='내과').count() == 1
    snuh = Hospital.objects.get(name='서울대학교병원')
    assert snuh.hospital_departments.count() == 4


@pytest.mark.django_db
def test_create_admin_promotes_user():
    from django.core.management import CommandError, call_command

    with pytest.raises(CommandError):
        call_command('create_admin', 'nopass')
    assert not User.objects.filter(username='nopass').exists()

    User.objects.create_user(username='staffer', password='x')
    call_command('create_admin', 'staffer', '--name', '관리자')
    user = User.objects.get(username='staffer')
    assert user.role == User.ROLE_ADMIN
    assert user.name == '관리자'
    assert check_admin(user).authorized
