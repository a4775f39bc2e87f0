"""Named query conditions that narrow a data grid."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from django import forms


class Filter:
    """A removable query condition on one ``select`` expression.

    The filter only participates in the query once it has a raw value. The
    raw value usually comes from namespaced request parameters.
    """

    OPERATION_EQUAL = "="
    OPERATION_IN = "IN"
    OPERATION_LIKE = "LIKE"
    OPERATION_GREATER_THAN_EQUAL = ">="
    OPERATION_LESS_THAN_EQUAL = "<="

    OPERATIONS = {
        OPERATION_EQUAL,
        OPERATION_IN,
        OPERATION_LIKE,
        OPERATION_GREATER_THAN_EQUAL,
        OPERATION_LESS_THAN_EQUAL,
    }

    required = False

    def __init__(self, name: str, select: str, label: str = "", operation: str = OPERATION_EQUAL):
        if operation not in self.OPERATIONS:
            raise ValueError(f"Unsupported filter operation '{operation}' for {name}")
        self.name = name
        self.select = select
        self.label = label or name.replace("_", " ").title()
        self.operation = operation
        self._raw_value: Any = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    def get_name(self) -> str:
        return self.name

    def get_label(self) -> str:
        return self.label

    def set_raw_value(self, value: Any) -> None:
        self._raw_value = value

    def get_raw_value(self) -> Any:
        return self._raw_value

    def has_raw_value(self) -> bool:
        value = self.get_raw_value()
        if isinstance(value, (list, tuple)):
            return any(v not in (None, "") for v in value)
        return value not in (None, "")

    def get_values(self) -> List[Any]:
        value = self.get_raw_value()
        if isinstance(value, (list, tuple)):
            return [v for v in value if v not in (None, "")]
        return [value]

    def get_sql_and_params(self) -> Tuple[str, List[Any]]:
        """Return the WHERE fragment and its parameters, or ``("", [])``."""
        if not self.has_raw_value():
            return "", []
        values = self.get_values()
        if self.operation == self.OPERATION_IN:
            placeholders = ", ".join(["%s"] * len(values))
            return f"{self.select} IN ({placeholders})", values
        if self.operation == self.OPERATION_LIKE:
            return f"{self.select} LIKE %s", [f"%{values[0]}%"]
        return f"{self.select} {self.operation} %s", [values[0]]

    def clean_value(self, value: Any) -> Any:
        """Validate a raw request value with :meth:`form_field`.

        Raises ``ValidationError`` when the value does not fit the field.
        """
        return self.form_field().clean(value)

    def form_field(self) -> forms.Field:
        return forms.CharField(label=self.get_label(), required=False)


class SelectFilter(Filter):
    """Filter constrained to a fixed set of choices."""

    def __init__(self, name, select, label="", choices: Optional[Sequence[Tuple[Any, str]]] = None, multiple=False):
        operation = self.OPERATION_IN if multiple else self.OPERATION_EQUAL
        super().__init__(name, select, label, operation=operation)
        self.choices = list(choices or [])
        self.multiple = multiple

    def has_raw_value(self) -> bool:
        allowed = {str(key) for key, _ in self.choices}
        return super().has_raw_value() and all(str(v) in allowed for v in self.get_values())

    def form_field(self) -> forms.Field:
        if self.multiple:
            return forms.MultipleChoiceField(label=self.get_label(), choices=self.choices, required=False)
        return forms.ChoiceField(label=self.get_label(), choices=[("", "---------")] + self.choices, required=False)


class DateFilter(Filter):
    """Range filter on a date column.

    The raw value is a mapping ``{"after": ..., "before": ...}`` (either key
    optional) or a single value meaning "on or after".
    """

    def __init__(self, name, select, label=""):
        super().__init__(name, select, label, operation=self.OPERATION_GREATER_THAN_EQUAL)

    def _bounds(self):
        value = self.get_raw_value()
        if isinstance(value, dict):
            return value.get("after") or None, value.get("before") or None
        return (value or None), None

    def has_raw_value(self) -> bool:
        after, before = self._bounds()
        return after is not None or before is not None

    def get_sql_and_params(self) -> Tuple[str, List[Any]]:
        after, before = self._bounds()
        clauses, params = [], []
        if after is not None:
            clauses.append(f"{self.select} >= %s")
            params.append(after)
        if before is not None:
            clauses.append(f"{self.select} <= %s")
            params.append(before)
        return " AND ".join(clauses), params

    def clean_value(self, value: Any) -> Any:
        field = self.form_field()
        if isinstance(value, dict):
            return {bound: field.clean(value[bound]) for bound in ("after", "before") if bound in value}
        return field.clean(value)

    def form_field(self) -> forms.Field:
        return forms.DateField(
            label=self.get_label(),
            required=False,
            widget=forms.DateInput(attrs={"type": "date"}),
        )


class Condition(Filter):
    """A filter that always applies and is not exposed to end users."""

    required = True

    def __init__(self, name, select, value=None, label="", operation=Filter.OPERATION_EQUAL):
        super().__init__(name, select, label, operation=operation)
        self.set_raw_value(value)


class LoggedInUserCondition(Condition):
    """Limits rows to the user viewing the block."""

    def __init__(self, name, select, context, label=""):
        user = getattr(context, "user", None)
        super().__init__(name, select, value=getattr(user, "pk", None), label=label)

    def has_raw_value(self) -> bool:
        return True

    def get_sql_and_params(self):
        if self.get_raw_value() is None:
            # Anonymous viewers see nothing rather than everything.
            return "1 = 0", []
        return super().get_sql_and_params()
