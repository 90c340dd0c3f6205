"""
Database models for the hospital directory.

Hospitals and departments make up the public directory; visitors file
contact/visit requests against a hospital, write reviews and post
questions on the Q&A board.  Field names follow Django conventions and
are converted to the camelCase keys the front-end expects by the
``format_*`` helpers in :mod:`directory.services`.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Site member.  Only ``admin`` users may use the administration tools."""
    ROLE_USER = 'user'
    ROLE_ADMIN = 'admin'
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_ADMIN, 'Administrator'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)
    name = models.CharField(max_length=100, blank=True)
    image = models.URLField(max_length=500, blank=True, null=True)

    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Department(models.Model):
    """A medical specialty offered by hospitals (e.g. 내과, 정형외과)."""
    name = models.CharField(max_length=100, unique=True)
    name_en = models.CharField(max_length=100, blank=True, null=True)
    icon = models.CharField(max_length=16, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.name


class Hospital(models.Model):
    """A hospital listed in the directory.

    ``name`` and ``address`` are required; everything else is optional
    and may be filled in later from the Django admin.
    """
    name = models.CharField(max_length=255)
    name_en = models.CharField(max_length=255, blank=True, null=True)
    address = models.CharField(max_length=500)
    phone = models.CharField(max_length=50, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    website = models.URLField(max_length=500, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    departments = models.ManyToManyField(
        Department, through='HospitalDepartment', related_name='hospitals', blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.name


class HospitalDepartment(models.Model):
    """Join row linking a hospital to one of its departments."""
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name='hospital_departments')
    department = models.ForeignKey(Department, on_delete=models.CASCADE, related_name='hospital_departments')

    class Meta:
        unique_together = [('hospital', 'department')]

    def __str__(self) -> str:
        return f"{self.hospital_id}:{self.department_id}"


class Request(models.Model):
    """A visit or contact request addressed to a hospital."""
    STATUS_NEW = 'new'
    STATUS_CONTACTED = 'contacted'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'
    STATUS_CHOICES = [
        (STATUS_NEW, '신규'),
        (STATUS_CONTACTED, '연락 완료'),
        (STATUS_COMPLETED, '완료'),
        (STATUS_CANCELLED, '취소'),
    ]
    TYPE_CHOICES = [
        ('inquiry', '일반 문의'),
        ('reservation', '예약 문의'),
    ]
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name='requests')
    type = models.CharField(max_length=32)
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=50)
    email = models.EmailField(blank=True, null=True)
    language = models.CharField(max_length=16, blank=True, null=True)
    message = models.TextField(blank=True, null=True)
    # 관리자 목록 필터링에 사용
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_NEW, db_index=True)
    preferred_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['hospital', 'created_at'], name='request_hospital_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.type} by {self.name} for {self.hospital_id}"


class Review(models.Model):
    """A hospital review.  ``is_verified`` is maintained by the review verifier."""
    user = models.ForeignKey(User, null=True, blank=True, on_delete=models.SET_NULL, related_name='reviews')
    hospital = models.ForeignKey(Hospital, on_delete=models.CASCADE, related_name='reviews')
    title = models.CharField(max_length=255, blank=True, null=True)
    content = models.TextField()
    rating = models.DecimalField(max_digits=2, decimal_places=1)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'created_at'], name='review_user_created_idx'),
        ]

    def __str__(self) -> str:
        return f"review {self.id} h={self.hospital_id} u={self.user_id}"


class QnA(models.Model):
    """A question on the Q&A board.  ``view_count`` only ever grows."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='questions')
    title = models.CharField(max_length=255)
    content = models.TextField()
    view_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'Q&A'
        verbose_name_plural = 'Q&A'

    def __str__(self) -> str:
        return self.title
