from django import template
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

from directory.components import RETRY_LABEL, ErrorMessage, HospitalCardImage, highlight_segments

register = template.Library()


@register.inclusion_tag('directory/components/error_message.html')
def error_message(message, title=None, retry_url=None):
    if title:
        component = ErrorMessage(message=message, title=title, retry_url=retry_url)
    else:
        component = ErrorMessage(message=message, retry_url=retry_url)
    return {'component': component, 'retry_label': RETRY_LABEL}


@register.filter(needs_autoescape=True)
def highlight(text, term, autoescape=True):
    """``{{ hospital.name|highlight:q }}`` wraps matches of ``q`` in ``<mark>``."""
    esc = conditional_escape if autoescape else (lambda s: s)
    out = []
    for part, marked in highlight_segments(str(text or ''), str(term or '')):
        if marked:
            out.append(format_html('<mark class="highlight">{}</mark>', part))
        else:
            out.append(esc(part))
    return mark_safe(''.join(str(p) for p in out))


@register.inclusion_tag('directory/components/hospital_card_image.html')
def hospital_card_image(image_url, name, height_class='h-48'):
    image = HospitalCardImage(image_url, name, height_class)
    return {'image': image, 'placeholder': HospitalCardImage.PLACEHOLDER}
