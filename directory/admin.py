"""
Django admin registrations for the directory models, served under
``/django-admin/``.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Department, Hospital, HospitalDepartment, QnA, Request, Review, User


class HospitalDepartmentInline(admin.TabularInline):
    model = HospitalDepartment
    extra = 1


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'name_en', 'city', 'phone', 'created_at')
    search_fields = ('name', 'name_en', 'address', 'city')
    inlines = [HospitalDepartmentInline]


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'name_en', 'icon')
    search_fields = ('name', 'name_en')


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'name', 'role', 'is_staff', 'is_superuser')
    list_filter = ('role', 'is_staff')
    search_fields = ('username', 'name', 'email')
    fieldsets = BaseUserAdmin.fieldsets + (('Directory', {'fields': ('role', 'name', 'image')}),)


@admin.register(Request)
class RequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'hospital', 'type', 'name', 'phone', 'status', 'created_at')
    list_filter = ('status', 'type')
    search_fields = ('name', 'phone', 'email', 'hospital__name')


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'hospital', 'user', 'rating', 'is_verified', 'created_at')
    list_filter = ('is_verified',)
    search_fields = ('title', 'content', 'hospital__name')


@admin.register(QnA)
class QnAAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'user', 'view_count', 'created_at')
    search_fields = ('title', 'content')
