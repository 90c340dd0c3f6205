from django.core.management.base import BaseCommand
from django.db import transaction

from directory.models import Department, Hospital, HospitalDepartment

DEPARTMENTS = [
    ("내과", "Internal Medicine", "🫁", "내과 질환 진료"),
    ("외과", "Surgery", "⚕️", "수술 및 외과 질환 진료"),
    ("정형외과", "Orthopedics", "🦴", "뼈, 관절, 근육 질환 진료"),
    ("산부인과", "Obstetrics and Gynecology", "👶", "여성 건강 및 산과 진료"),
    ("소아과", "Pediatrics", "👶", "소아 질환 진료"),
    ("안과", "Ophthalmology", "👁️", "눈 질환 진료"),
    ("이비인후과", "ENT (Ear, Nose, Throat)", "👂", "귀, 코, 목 질환 진료"),
    ("치과", "Dentistry", "🦷", "치아 및 구강 질환 진료"),
    ("피부과", "Dermatology", "✨", "피부 질환 진료"),
    ("정신건강의학과", "Psychiatry", "🧠", "정신 건강 진료"),
]

HOSPITALS = [
    {
        "name": "서울대학교병원",
        "name_en": "Seoul National University Hospital",
        "address": "서울특별시 종로구 대학로 101",
        "city": "Seoul",
        "country": "Korea",
        "phone": "+82-2-2072-2114",
        "website": "https://www.snuh.org",
        "departments": ["내과", "외과", "소아과", "안과"],
    },
    {
        "name": "삼성서울병원",
        "name_en": "Samsung Medical Center",
        "address": "서울특별시 강남구 일원로 81",
        "city": "Seoul",
        "country": "Korea",
        "phone": "+82-2-3410-2114",
        "website": "https://www.samsunghospital.com",
        "departments": ["내과", "정형외과", "산부인과", "피부과"],
    },
    {
        "name": "아산서울병원",
        "name_en": "Asan Medical Center",
        "address": "서울특별시 송파구 올림픽로43길 88",
        "city": "Seoul",
        "country": "Korea",
        "phone": "+82-1688-7575",
        "website": "https://www.amc.seoul.kr",
        "departments": ["외과", "이비인후과", "치과", "정신건강의학과"],
    },
]


class Command(BaseCommand):
    help = "Populate demo departments and hospitals (idempotent)."

    @transaction.atomic
    def handle(self, *args, **options):
        by_name = {}
        for name, name_en, icon, description in DEPARTMENTS:
            dept, _ = Department.objects.update_or_create(
                name=name, defaults={"name_en": name_en, "icon": icon, "description": description}
            )
            by_name[name] = dept
        self.stdout.write(self.style.SUCCESS(f"{len(by_name)} departments ready"))

        for row in HOSPITALS:
            row = dict(row)
            dept_names = row.pop("departments")
            hospital, created = Hospital.objects.update_or_create(name=row["name"], defaults=row)
            for dname in dept_names:
                HospitalDepartment.objects.get_or_create(hospital=hospital, department=by_name[dname])
            self.stdout.write(f"{'created' if created else 'updated'}: {hospital.name}")
        self.stdout.write(self.style.SUCCESS("Directory seeded."))
