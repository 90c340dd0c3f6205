"""
Review listing and automatic verification.

A review is verified automatically when:

1. it was written by a signed-in user,
2. its content is at least ``MIN_CONTENT_LENGTH`` characters long,
3. its rating is at least ``MIN_RATING``,
4. neither its content nor its title contains a spam or profanity keyword.

``reverify_all_reviews`` re-applies these rules to every stored review
and is exposed to administrators as a maintenance tool.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction

from directory.models import Review
from directory.services.hospitals import format_hospital_summary

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 30
MIN_RATING = Decimal('0.5')

SPAM_KEYWORDS = (
    '광고',
    '홍보',
    '스팸',
    '돈벌기',
    '무료',
    '클릭',
    '링크',
    '사이트',
)

PROFANITY_KEYWORDS = (
    '욕설1',
    '욕설2',
)


def contains_inappropriate_content(content: str, title: Optional[str] = None) -> bool:
    text = f"{content} {title or ''}".lower()
    return any(k.lower() in text for k in SPAM_KEYWORDS + PROFANITY_KEYWORDS)


def should_auto_verify(*, user_id: Optional[int], content: str, title: Optional[str], rating) -> bool:
    if not user_id:
        return False
    if len(content or '') < MIN_CONTENT_LENGTH:
        return False
    if Decimal(str(rating)) < MIN_RATING:
        return False
    return not contains_inappropriate_content(content or '', title)


def _verdict(review: Review) -> bool:
    return should_auto_verify(
        user_id=review.user_id, content=review.content, title=review.title, rating=review.rating
    )


def set_review_verified(review_id: int, is_verified: bool) -> Review:
    """Manually set the verification flag of one review.

    Overrides the automatic verdict until the next full reverification.
    Raises ``Review.DoesNotExist``.
    """
    review = Review.objects.select_related('hospital').get(id=review_id)
    if review.is_verified != is_verified:
        review.is_verified = is_verified
        review.save(update_fields=['is_verified'])
    logger.info("review %s marked verified=%s", review_id, is_verified)
    return review


@transaction.atomic
def reverify_all_reviews() -> dict[str, int]:
    verified = unverified = total = 0
    fields = ('id', 'user', 'content', 'title', 'rating', 'is_verified')
    for review in list(Review.objects.only(*fields).order_by('id')):
        total += 1
        verdict = _verdict(review)
        if verdict != review.is_verified:
            Review.objects.filter(id=review.id).update(is_verified=verdict)
        if verdict:
            verified += 1
        else:
            unverified += 1
    logger.info("reverified %d reviews (%d verified, %d unverified)", total, verified, unverified)
    return {'total': total, 'verified': verified, 'unverified': unverified}


def list_user_reviews(user_id: int):
    return Review.objects.filter(user_id=user_id).select_related('hospital').order_by('-created_at', '-id')


def format_review(review: Review) -> dict:
    return {
        'id': review.id,
        'userId': review.user_id,
        'hospitalId': review.hospital_id,
        'title': review.title,
        'content': review.content,
        'rating': float(review.rating),
        'isVerified': review.is_verified,
        'createdAt': review.created_at.isoformat(),
        'hospital': format_hospital_summary(review.hospital, with_name_en=False),
    }
