"""Admin registrations for Records models."""

from __future__ import annotations

from django.contrib import admin
from django.db.models import QuerySet

from athletes.models import Athlete
from records.models import PersonalRecord


class AthleteScopedAdmin(admin.ModelAdmin):
    """ModelAdmin that enforces per-athlete queryset filtering and ownership on create."""

    athlete_field_name = "athlete"

    def get_queryset(self, request) -> QuerySet:
        """Return a queryset scoped to the authenticated user's Athlete."""

        qs = super().get_queryset(request)
        if request.user.is_superuser:
            return qs
        return qs.filter(**{f"{self.athlete_field_name}__user": request.user})

    def get_readonly_fields(self, request, obj=None):  # type: ignore[override]
        """Prevent non-superusers from reassigning ownership fields."""

        readonly = list(super().get_readonly_fields(request, obj=obj))
        if not request.user.is_superuser and self.athlete_field_name not in readonly:
            readonly.append(self.athlete_field_name)
        return tuple(readonly)

    def save_model(self, request, obj, form, change) -> None:  # type: ignore[override]
        """Assign athlete ownership automatically for non-superusers."""

        if not request.user.is_superuser and not change:
            athlete, _ = Athlete.objects.get_or_create(
                user=request.user,
                defaults={"display_name": request.user.get_username()},
            )
            setattr(obj, self.athlete_field_name, athlete)
        super().save_model(request, obj, form, change)


@admin.register(PersonalRecord)
class PersonalRecordAdmin(AthleteScopedAdmin):
    """Admin configuration for PersonalRecord."""

    list_display = ("athlete", "exercise", "value", "unit", "target", "recorded_on")
    list_filter = ("exercise", "unit")
    search_fields = ("exercise",)
    date_hierarchy = "recorded_on"
