"""
django-filter building blocks for the admin list endpoints.

List parameters arrive as repeated keys (``status=1&status=0``), bracketed
keys (``status[]=1``), JSON lists or comma separated strings; the widgets
below read every form. Each app declares one ``AdminFilterSet`` per list.
"""

from typing import Any, List, Mapping

import django_filters
from django import forms
from django.db.models import Q
from django_filters.fields import DateRangeField, DateTimeRangeField
from django_filters.widgets import DateRangeWidget

from .services.base import ValidationServiceError


def _is_blank(value: Any) -> bool:
    return value is None or value == '' or value == []


def _raw_list(params: Mapping, key: str) -> List[Any]:
    values: List[Any] = []
    if hasattr(params, 'getlist'):
        values = params.getlist(key) or params.getlist(f'{key}[]')
    else:
        raw = params.get(key)
        if isinstance(raw, (list, tuple)):
            values = list(raw)
        elif not _is_blank(raw):
            values = [raw]

    if len(values) == 1 and isinstance(values[0], str) and ',' in values[0]:
        values = values[0].split(',')
    return [value.strip() if isinstance(value, str) else value for value in values]


def param_list(params: Mapping, key: str) -> List[Any]:
    """
    Read a list parameter.

    Blank entries are dropped; a single comma separated string is split.
    """
    return [value for value in _raw_list(params, key) if not _is_blank(value)]


class ListWidget(forms.Widget):

    def value_from_datadict(self, data, files, name):
        return param_list(data, name)


class ValueListField(forms.Field):
    """A list of values, each passed through ``coerce``."""
    widget = ListWidget

    def __init__(self, *args, coerce=str, **kwargs):
        self.coerce = coerce
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]
        try:
            return [self.coerce(item) for item in value]
        except (TypeError, ValueError):
            raise forms.ValidationError(f"Invalid value: {value}")


class ValueListFilter(django_filters.Filter):
    """One value or several; a row matching any of them passes."""
    field_class = ValueListField

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('lookup_expr', 'in')
        super().__init__(*args, **kwargs)


class ListRangeWidget(DateRangeWidget):
    """
    ``name=[start, end]`` in any list form; either bound may be blank.

    The suffixed ``name_after`` / ``name_before`` keys work too.
    """

    def value_from_datadict(self, data, files, name):
        values = _raw_list(data, name)
        if any(not _is_blank(value) for value in values):
            return (values + [None, None])[:2]
        return super().value_from_datadict(data, files, name)


class ListDateRangeField(DateRangeField):
    widget = ListRangeWidget


class ListDateTimeRangeField(DateTimeRangeField):
    widget = ListRangeWidget


class DateFromToFilter(django_filters.DateFromToRangeFilter):
    """Whole days: the end date runs to the last instant of that day."""
    field_class = ListDateRangeField


class DateTimeFromToFilter(django_filters.DateTimeFromToRangeFilter):
    field_class = ListDateTimeRangeField


class AdminFilterSet(django_filters.FilterSet):
    """
    FilterSet whose invalid input is reported as ``ValidationServiceError``.

    Subclasses that declare ``keyword = CharFilter(method='filter_keyword')``
    list the searched columns in ``search_fields``; a row matching in any
    of them passes.
    """
    search_fields = ()

    def filter_keyword(self, queryset, name, value):
        query = Q()
        for field in self.search_fields:
            query |= Q(**{f'{field}__icontains': value})
        return queryset.filter(query)

    @classmethod
    def apply(cls, params, queryset, request=None):
        filterset = cls(data=params or {}, queryset=queryset, request=request)
        if not filterset.is_valid():
            errors = '; '.join(
                f"{name}: {' '.join(messages)}" for name, messages in filterset.errors.items()
            )
            raise ValidationServiceError(f"Invalid filters: {errors}")
        return filterset.qs
