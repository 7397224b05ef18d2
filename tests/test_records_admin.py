"""Tests for athlete-scoped record admin."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import RequestFactory

from athletes.models import Athlete
from records.admin import PersonalRecordAdmin
from records.models import PersonalRecord

pytestmark = pytest.mark.integration


@pytest.mark.django_db
def test_save_model_provisions_missing_athlete_for_staff() -> None:
    """Staff without an Athlete get one when they add a record."""

    staff = get_user_model().objects.create_user(username="coach", password="password", is_staff=True)
    Athlete.objects.filter(user=staff).delete()
    staff = get_user_model().objects.get(pk=staff.pk)
    request = RequestFactory().post("/admin/records/personalrecord/add/")
    request.user = staff
    record = PersonalRecord(exercise="Squat", value=Decimal("275"), recorded_on=date(2023, 10, 20))

    PersonalRecordAdmin(PersonalRecord, admin.site).save_model(request, record, form=None, change=False)

    athlete = Athlete.objects.get(user=staff)
    assert record.pk is not None
    assert record.athlete == athlete
    assert athlete.display_name == "coach"


@pytest.mark.django_db
def test_save_model_uses_existing_athlete(user, athlete) -> None:
    """Records added by a non-superuser belong to their own Athlete."""

    request = RequestFactory().post("/admin/records/personalrecord/add/")
    request.user = user
    record = PersonalRecord(exercise="Bench Press", value=Decimal("185"), recorded_on=date(2023, 10, 15))

    PersonalRecordAdmin(PersonalRecord, admin.site).save_model(request, record, form=None, change=False)

    assert record.athlete == athlete
    assert Athlete.objects.filter(user=user).count() == 1
