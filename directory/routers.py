"""
URL mappings for the hospital directory.

API paths mirror the front-end routes without trailing slashes.  Path
ids are captured as strings so that malformed ids reach the views and
get a 400 response instead of a routing 404.
"""
from django.urls import path, include

from .views import admin_hospitals, admin_requests, admin_reviews, health, hospitals, qna, users
from .views.admin_pages import admin_dashboard_page, admin_new_hospital_page, admin_requests_page
from .views.pages import hospital_detail_page, hospital_list_page, qna_detail_page


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Public API
    path('api/hospitals/<str:id>', hospitals.hospital_detail, name='hospital_detail'),
    path('api/hospitals/<str:id>/requests', hospitals.create_hospital_request, name='hospital_requests'),
    path('api/qna/<str:id>', qna.qna_detail, name='qna_detail'),
    path('api/users/<str:id>/reviews', users.user_reviews, name='user_reviews'),
    # Admin API
    path('api/admin/requests', admin_requests.admin_requests, name='admin_requests'),
    path('api/admin/requests/<str:id>', admin_requests.admin_request_detail, name='admin_request_detail'),
    path('api/admin/reviews/reverify', admin_reviews.reverify_reviews, name='admin_reviews_reverify'),
    path('api/admin/reviews/<str:id>/verify', admin_reviews.verify_review, name='admin_review_verify'),
    path('api/admin/hospitals', admin_hospitals.admin_create_hospital, name='admin_hospitals'),
    # Pages
    path('', hospital_list_page),
    path('hospitals', hospital_list_page, name='hospital_list_page'),
    path('hospitals/<str:id>', hospital_detail_page, name='hospital_detail_page'),
    path('qna/<str:id>', qna_detail_page, name='qna_detail_page'),
    path('admin/', admin_dashboard_page, name='admin_dashboard_page'),
    path('admin/requests', admin_requests_page, name='admin_requests_page'),
    path('admin/hospitals/new', admin_new_hospital_page, name='admin_new_hospital_page'),
]
