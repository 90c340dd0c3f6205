import pytest
from django.template import Context, Template

from directory.components import ErrorMessage, HospitalCardImage, highlight_segments


@pytest.mark.parametrize('text,term,expected', [
    ('Hello World', 'world', [('Hello ', False), ('World', True)]),
    ('Hello World', '', [('Hello World', False)]),
    ('Hello World', '   ', [('Hello World', False)]),
    ('a.b.c', '.', [('a', False), ('.', True), ('b', False), ('.', True), ('c', False)]),
    ('서울대학교병원', '대학', [('서울', False), ('대학', True), ('교병원', False)]),
    ('abcabc', 'abc', [('abc', True), ('abc', True)]),
    ('nothing here', 'zzz', [('nothing here', False)]),
])
def test_highlight_segments(text, term, expected):
    assert highlight_segments(text, term) == expected


def render(source, **context):
    return Template('{% load directory_ui %}' + source).render(Context(context))


def test_highlight_filter_wraps_matches():
    html = render('{{ name|highlight:q }}', name='Hello World', q='world')
    assert html == 'Hello <mark class="highlight">World</mark>'


def test_highlight_filter_escapes_text():
    html = render('{{ name|highlight:q }}', name='<b>Tom</b> & Jerry', q='tom')
    assert '<b>' not in html
    assert '&lt;b&gt;<mark class="highlight">Tom</mark>&lt;/b&gt; &amp; Jerry' == html


def test_highlight_filter_blank_term():
    assert render('{{ name|highlight:q }}', name='Hello', q='') == 'Hello'


def test_error_message_defaults():
    component = ErrorMessage('불러오지 못했습니다')
    assert component.title == '오류가 발생했습니다'
    assert not component.can_retry
    assert ErrorMessage('x', retry_url='/admin/requests').can_retry


def test_error_message_tag():
    html = render('{% error_message msg %}', msg='실패')
    assert '오류가 발생했습니다' in html
    assert '실패' in html
    assert '다시 시도' not in html

    html = render('{% error_message msg title="제목" retry_url="/retry" %}', msg='실패')
    assert '제목' in html
    assert 'href="/retry"' in html
    assert '다시 시도' in html


def test_hospital_card_image_placeholder_is_sticky():
    image = HospitalCardImage('https://img.example.com/h.png', '병원')
    assert not image.show_placeholder
    image.mark_failed()
    assert image.failed
    assert image.show_placeholder
    image.mark_failed()
    assert image.show_placeholder


def test_hospital_card_image_without_url():
    assert HospitalCardImage('', '병원').show_placeholder
    assert HospitalCardImage(None, '병원').show_placeholder


def test_hospital_card_image_tag():
    html = render('{% hospital_card_image url name %}', url=None, name='병원')
    assert '🏥' in html
    assert '<img' not in html

    html = render('{% hospital_card_image url name "h-32" %}', url='https://img.example.com/h.png', name='병원')
    assert 'src="https://img.example.com/h.png"' in html
    assert 'alt="병원"' in html
    assert 'h-32' in html
