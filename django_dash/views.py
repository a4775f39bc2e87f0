import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.translation import gettext as _

from django_dash.blocks import DashBlock
from django_dash.configuration import Configuration
from django_dash.context import DashContext
from django_dash.forms import PreferencesForm
from django_dash.models import BlockInstance

log = logging.getLogger(__name__)


@login_required
def block_view(request, pk):
    instance = get_object_or_404(BlockInstance, pk=pk)
    return HttpResponse(DashBlock(instance).render(request))


@login_required
def preferences_view(request, pk):
    instance = get_object_or_404(BlockInstance, pk=pk)
    configuration = Configuration.create_from_instance(
        instance, DashContext.from_request(request, instance_id=instance.pk)
    )
    if not configuration.is_fully_configured():
        messages.error(request, _("Choose a data source before editing preferences."))
        return redirect("django_dash:block", pk=instance.pk)

    data_source = configuration.get_template()
    if request.method == "POST":
        form = PreferencesForm(request.POST, data_source=data_source)
        if form.is_valid():
            instance.preferences = form.get_preferences()
            instance.save(update_fields=["preferences", "updated_at"])
            log.info("Saved preferences for dash block %s", instance.pk)
            messages.success(request, _("Preferences saved."))
            return redirect("django_dash:block", pk=instance.pk)
    else:
        form = PreferencesForm(data_source=data_source)
    return render(request, "dash/preferences.html", {"form": form, "block": instance})
