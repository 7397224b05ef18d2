"""JSON views exposing personal-record projections."""

from __future__ import annotations

import logging

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.views.decorators.http import require_GET

from athletes.models import Athlete
from core.forms import ProjectionQueryForm
from core.services import project_record, projection_payload, summarize_records
from records.models import PersonalRecord

logger = logging.getLogger(__name__)


def _request_athlete(request: HttpRequest) -> Athlete:
    """Return the Athlete for the authenticated user, creating it when missing."""

    athlete, _ = Athlete.objects.get_or_create(
        user=request.user,
        defaults={"display_name": request.user.get_username()},
    )
    return athlete


@login_required
@require_GET
def records_api(request: HttpRequest) -> JsonResponse:
    """Return the newest record per exercise with progress and time-to-goal."""

    athlete = _request_athlete(request)
    summaries = summarize_records(athlete=athlete)
    return JsonResponse(
        {
            "training_level": athlete.training_level,
            "records": [summary.as_json() for summary in summaries],
        }
    )


@login_required
@require_GET
def record_projection_api(request: HttpRequest, record_id: int) -> JsonResponse:
    """Return the projection and chart geometry for one of the user's records."""

    athlete = _request_athlete(request)
    record = get_object_or_404(PersonalRecord.objects.select_related("athlete"), pk=record_id, athlete=athlete)

    form = ProjectionQueryForm(request.GET)
    if not form.is_valid():
        logger.info("Rejected projection query for record %s: %s", record_id, form.errors.as_json())
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)

    projection = project_record(
        record,
        today=timezone.localdate(),
        width=form.cleaned_data.get("width"),
        height=form.cleaned_data.get("height"),
        selected_display=form.cleaned_data.get("selected_display"),
        selected_projected=form.cleaned_data.get("selected_projected"),
    )
    return JsonResponse(projection_payload(projection))
