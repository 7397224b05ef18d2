"""Forms for validating projection query parameters."""

from __future__ import annotations

from django import forms

MAX_CHART_DIMENSION = 4000


class ProjectionQueryForm(forms.Form):
    """Validate chart size and caller-owned selection state."""

    width = forms.FloatField(
        required=False,
        min_value=1,
        max_value=MAX_CHART_DIMENSION,
        label="Chart width",
    )
    height = forms.FloatField(
        required=False,
        min_value=1,
        max_value=MAX_CHART_DIMENSION,
        label="Chart height",
    )
    selected_display = forms.IntegerField(
        required=False,
        min_value=0,
        label="Selected display point",
        help_text="Index of the highlighted point in the history chart.",
    )
    selected_projected = forms.IntegerField(
        required=False,
        min_value=0,
        label="Selected projected point",
        help_text="Index of the highlighted point in the projection chart.",
    )
