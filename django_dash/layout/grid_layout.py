from django import forms
from django.http import QueryDict
from django.utils.translation import gettext_lazy as _

from django_dash.conf import settings
from django_dash.layout.base import BaseLayout


class GridLayout(BaseLayout):
    """Paginated table of the visible fields."""

    identifier = "grid"
    verbose_name = _("Grid")
    template_name = "dash/layout/grid.html"

    def supports_pagination(self):
        return True

    def before_data(self):
        grid = self.data_source.get_data_grid()
        grid.set_per_page(self.data_source.get_preferences("per_page") or settings.DASH_PER_PAGE)
        grid.set_page_number(self.data_source.get_context().get_page_number())

    def build_preferences_form(self, form):
        form.fields["per_page"] = forms.IntegerField(
            label=_("Rows per page"),
            min_value=1,
            max_value=500,
            required=False,
            initial=self.data_source.get_preferences("per_page") or settings.DASH_PER_PAGE,
        )
        super().build_preferences_form(form)

    def export_for_template(self, request=None):
        context = super().export_for_template(request)
        page = self.data_source.get_data_grid().get_page()
        context["page"] = page
        context["paginator"] = page.paginator
        page_param = self.data_source.get_context().namespace + "page"
        context["page_param"] = page_param
        if request is None:
            request = self.data_source.get_context().request
        context["previous_page_url"] = (
            self.get_page_url(request, page_param, page.previous_page_number()) if page.has_previous() else ""
        )
        context["next_page_url"] = (
            self.get_page_url(request, page_param, page.next_page_number()) if page.has_next() else ""
        )
        return context

    @staticmethod
    def get_page_url(request, page_param, number):
        """Query string for ``number`` keeping the other request parameters."""
        params = getattr(request, "GET", None)
        params = params.copy() if params is not None else QueryDict(mutable=True)
        params[page_param] = str(number)
        return "?" + params.urlencode()
